import inspect

from folio.cli import cli


def test_window(cli_runner):
    result = cli_runner.invoke(cli, ["window", "--page", "10", "--total-pages", "20"])
    assert result.exit_code == 0
    assert result.output == (
        "< 1 2 ... 6 7 8 9 [10] 11 12 13 14 ... 19 20 >\n"
    )


def test_window_options(cli_runner):
    result = cli_runner.invoke(
        cli,
        ["window", "--page", "1", "--total-pages", "9", "--inner-window", "1",
         "--outer-window", "0"],
    )
    assert result.exit_code == 0
    assert result.output == "< [1] 2 3 ... 9 >\n"


def test_render(cli_runner):
    result = cli_runner.invoke(
        cli,
        ["render", "--page", "2", "--per-page", "5", "--total-entries", "23",
         "--base-url", "/posts", "--no-container"],
    )
    assert result.exit_code == 0
    assert result.output.startswith('<a class="previous_page" rel="prev start"')
    assert '<em class="current">2</em>' in result.output
    assert 'href="/posts?page=5"' in result.output


def test_render_single_page(cli_runner):
    result = cli_runner.invoke(cli, ["render", "--total-entries", "3"])
    assert result.exit_code == 0
    assert "single page" in result.output


def test_render_invalid_page(cli_runner):
    result = cli_runner.invoke(cli, ["render", "--page", "0", "--total-entries", "3"])
    assert result.exit_code != 0


def test_config_file(cli_runner, tmp_path):
    config_file = tmp_path / "folio.ini"
    config_file.write_text(
        inspect.cleandoc(
            """
            [pagination]
            per_page = 5
            param_name = p

            [view]
            next_label = More
            """
        )
    )
    result = cli_runner.invoke(
        cli, ["--config", str(config_file), "render", "--total-entries", "23"]
    )
    assert result.exit_code == 0
    assert '<a class="next_page" rel="next" href="/?p=2">More</a>' in result.output
