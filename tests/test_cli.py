"""
Tests for the command line interface
"""
import pytest
import yaml
from typer.testing import CliRunner

from blogstore.cli.app import app
from blogstore.cli.new import slugify
from blogstore.parsing import load_file


@pytest.fixture
def runner():
    """Typer CLI runner"""
    return CliRunner(env={"COLUMNS": "200"})


@pytest.fixture
def config_file(tmp_path, corpus_dir):
    """Config pointing at the example corpus"""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"content_root": str(corpus_dir)}), encoding="utf-8")
    return path


class TestBrowse:
    """list, show and taxonomy"""

    def test_list(self, runner, config_file):
        """Lists every article"""
        result = runner.invoke(app, ["--config", str(config_file), "list"])

        assert result.exit_code == 0
        assert "single-action-handlers" in result.output
        assert "mysql-cluster-setup" in result.output

    def test_list_filter(self, runner, config_file):
        """Tag filter narrows the listing"""
        result = runner.invoke(app, ["--config", str(config_file), "list", "--tag", "vue"])

        assert result.exit_code == 0
        assert "vue-custom-v-model" in result.output
        assert "kvm-kernel-patching" not in result.output

    def test_show(self, runner, config_file):
        """Shows one article"""
        result = runner.invoke(app, ["--config", str(config_file), "show", "single-action-handlers"])

        assert result.exit_code == 0
        assert "Single Action Handlers in PHP Frameworks" in result.output

    def test_show_missing(self, runner, config_file):
        """Unknown slug exits with an error"""
        result = runner.invoke(app, ["--config", str(config_file), "show", "missing"])

        assert result.exit_code == 1
        assert "missing" in result.output

    def test_taxonomy(self, runner, config_file):
        """Counts categories"""
        result = runner.invoke(app, ["--config", str(config_file), "taxonomy", "categories"])

        assert result.exit_code == 0
        assert "Sysadmin" in result.output

    def test_missing_config(self, runner, tmp_path):
        """A named config that does not exist is reported"""
        result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "list"])

        assert result.exit_code == 1
        assert "not found" in result.output


    def test_markup_in_labels(self, runner, tmp_path, config_file):
        """Labels that look like rich markup are printed literally"""
        content = tmp_path / "content"
        content.mkdir()
        (content / "a.md").write_text(
            "---\ntitle: T\nslug: tagged\ndate: 2018-01-01\n"
            "categories: ['[bold]']\ntags: ['[/php]']\nimage: '[red]x.png'\n---\nText\n",
            encoding="utf-8",
        )
        base = ["--config", str(config_file)]
        root = ["--content-root", str(content)]

        listed = runner.invoke(app, base + ["list"] + root)
        shown = runner.invoke(app, base + ["show", "tagged"] + root)
        counted = runner.invoke(app, base + ["taxonomy", "tags"] + root)

        assert listed.exit_code == 0
        assert "[/php]" in listed.output
        assert shown.exit_code == 0
        assert "[red]x.png" in shown.output
        assert counted.exit_code == 0
        assert "[/php]" in counted.output


class TestValidate:
    """validate command"""

    def test_valid_corpus(self, runner, config_file):
        """The example corpus passes"""
        result = runner.invoke(app, ["--config", str(config_file), "validate"])

        assert result.exit_code == 0
        assert "5 article(s) valid" in result.output

    def test_reports_every_problem(self, runner, tmp_path, config_file):
        """Parse and validation errors are all listed"""
        content = tmp_path / "content"
        content.mkdir()
        record = "---\ntitle: T\nslug: same\ndate: 2018-01-01\n---\n{body}"
        (content / "a.md").write_text(record.format(body="Text\n"), encoding="utf-8")
        (content / "b.md").write_text(record.format(body=""), encoding="utf-8")
        (content / "c.md").write_text("no metadata\n", encoding="utf-8")

        result = runner.invoke(
            app, ["--config", str(config_file), "validate", "--content-root", str(content)]
        )

        assert result.exit_code == 1
        assert "duplicate-slug" in result.output
        assert "empty-body" in result.output
        assert "parse error" in result.output
        assert "3 problem(s)" in result.output


class TestInitAndNew:
    """init and new commands"""

    def test_init(self, runner, tmp_path):
        """Writes a config file"""
        config_dir = tmp_path / "cfg"
        content = tmp_path / "posts"

        result = runner.invoke(
            app, ["init", "--config-dir", str(config_dir), "--content-root", str(content)]
        )

        assert result.exit_code == 0
        assert yaml.safe_load((config_dir / "config.yaml").read_text())["content_root"] == str(content)
        assert content.is_dir()

    def test_init_refuses_overwrite(self, runner, tmp_path):
        """Existing config is kept without --force"""
        config_dir = tmp_path / "cfg"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("content_root: keep\n")

        result = runner.invoke(app, ["init", "--config-dir", str(config_dir)])

        assert result.exit_code == 1
        assert (config_dir / "config.yaml").read_text() == "content_root: keep\n"

    def test_new(self, runner, tmp_path, config_file):
        """Scaffolds a valid article"""
        content = tmp_path / "posts"

        result = runner.invoke(
            app,
            [
                "--config", str(config_file),
                "new", "PHPStan at Level Max",
                "--tag", "php", "--tag", "static-analysis",
                "--content-root", str(content),
            ],
        )

        assert result.exit_code == 0
        [item] = load_file(content / "phpstan-at-level-max.md")
        assert item.title == "PHPStan at Level Max"
        assert item.tags == ["php", "static-analysis"]
        assert item.body.strip() == "# PHPStan at Level Max"

    def test_new_duplicate_slug(self, runner, config_file):
        """Refuses a slug that already exists"""
        result = runner.invoke(
            app, ["--config", str(config_file), "new", "Whatever", "--slug", "kvm-kernel-patching"]
        )

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_slugify(self):
        """Titles become URL-safe slugs"""
        assert slugify("Single Action Handlers in PHP Frameworks") == "single-action-handlers-in-php-frameworks"
        assert slugify("Café & Crème!") == "cafe-creme"

    def test_new_rejects_invalid_slug(self, runner, tmp_path, config_file):
        """Slugs failing the configured pattern are refused"""
        content = tmp_path / "posts"

        result = runner.invoke(
            app,
            ["--config", str(config_file), "new", "X", "--slug", "../Bad Slug!", "--content-root", str(content)],
        )

        assert result.exit_code == 1
        assert "not URL-safe" in result.output
        assert not list(tmp_path.rglob("*.md"))

    def test_new_stays_in_content_root(self, runner, tmp_path):
        """Even a permissive slug pattern cannot write outside the content root"""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.safe_dump({"slug_pattern": ".+"}), encoding="utf-8")
        content = tmp_path / "posts"

        result = runner.invoke(
            app,
            ["--config", str(config_path), "new", "X", "--slug", "../escaped", "--content-root", str(content)],
        )

        assert result.exit_code == 1
        assert "outside" in result.output
        assert not (tmp_path / "escaped.md").exists()
