import click

from folio.collection import Collection
from folio.config import Config
from folio.context import StaticRequestContext
from folio.exception import InvalidPage
from folio.view_helpers import paginate_links
from folio.view_helpers.link_renderer_base import LinkRendererBase
from folio.view_helpers.link_renderer_base import Marker


_marker_symbols = {
    Marker.GAP: "...",
    Marker.PREVIOUS_PAGE: "<",
    Marker.NEXT_PAGE: ">",
}


class Context:
    def __init__(self):
        self.config_path = None
        self._config = None

    def get_config(self):
        if self._config is None:
            self._config = Config(self.config_path)
        return self._config


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="FOLIO_CONFIG_FILE",
    help="An ini file with [pagination] and [view] sections.",
)
@click.version_option(package_name="Folio", prog_name="Folio")
@pass_context
def cli(ctx, config_path):
    """Folio previews pagination windows and links from the command line."""
    ctx.config_path = config_path


@cli.command("window", short_help="Show which page numbers are displayed.")
@click.option("--page", type=int, default=1, show_default=True)
@click.option("--total-pages", type=int, required=True)
@click.option("--inner-window", type=int, default=None)
@click.option("--outer-window", type=int, default=None)
@pass_context
def window_cmd(ctx, page, total_pages, inner_window, outer_window):
    """Prints the sequence of page numbers that would be linked for
    PAGE out of TOTAL_PAGES.  The current page is shown in brackets.
    """
    options = ctx.get_config().view_options
    if inner_window is not None:
        options["inner_window"] = inner_window
    if outer_window is not None:
        options["outer_window"] = outer_window

    try:
        collection = Collection(page, per_page=1, total_entries=total_pages)
    except InvalidPage as e:
        raise click.UsageError(str(e))
    renderer = LinkRendererBase()
    renderer.prepare(collection, options)

    tokens = []
    for item in renderer.pagination():
        if isinstance(item, Marker):
            tokens.append(_marker_symbols[item])
        elif item == page:
            tokens.append("[%d]" % item)
        else:
            tokens.append(str(item))
    click.echo(" ".join(tokens))


@cli.command("render", short_help="Render pagination links as HTML.")
@click.option("--page", type=int, default=1, show_default=True)
@click.option("--per-page", type=int, default=None)
@click.option("--total-entries", type=int, required=True)
@click.option("--param-name", default=None)
@click.option("--base-url", default="/", show_default=True)
@click.option("--container/--no-container", default=None)
@pass_context
def render_cmd(ctx, page, per_page, total_entries, param_name, base_url, container):
    """Renders the links for one page of a collection with the given
    number of entries.
    """
    config = ctx.get_config()
    try:
        collection = Collection(
            page, per_page=per_page, total_entries=total_entries, config=config
        )
    except InvalidPage as e:
        raise click.UsageError(str(e))
    options = {}
    if param_name is not None:
        options["param_name"] = param_name
    if container is not None:
        options["container"] = container

    html = paginate_links(
        collection, context=StaticRequestContext(base_url), config=config, **options
    )
    if html is None:
        click.echo("Everything fits on a single page.", err=True)
        return
    click.echo(html)


main = cli
