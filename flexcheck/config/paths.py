"""Fixed locations used by the preflight checks."""

from dataclasses import dataclass
from pathlib import Path

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

FLEX_UI_PACKAGE = "@twilio/flex-ui"
ENTRY_EXTENSIONS = ("js", "jsx", "ts", "tsx")


@dataclass(frozen=True)
class ProjectPaths:
    """Paths inside a plugin project."""

    dir: Path
    package_json: Path
    app_config: Path
    public_dir: Path
    index_html: Path
    ts_config: Path
    node_modules: Path
    src_index: Path
    flex_ui_package_json: Path

    @classmethod
    def for_project(cls, app_dir: Path) -> "ProjectPaths":
        app_dir = Path(app_dir).resolve()
        node_modules = app_dir / "node_modules"
        return cls(
            dir=app_dir,
            package_json=app_dir / "package.json",
            app_config=app_dir / "public" / "appConfig.js",
            public_dir=app_dir / "public",
            index_html=app_dir / "public" / "index.html",
            ts_config=app_dir / "tsconfig.json",
            node_modules=node_modules,
            src_index=app_dir / "src" / "index",
            flex_ui_package_json=node_modules.joinpath(
                *FLEX_UI_PACKAGE.split("/"), "package.json"
            ),
        )


@dataclass(frozen=True)
class CLIPaths:
    """Paths under the user-level CLI configuration directory."""

    flex_dir: Path
    plugins_json: Path

    @classmethod
    def for_home(cls, home: Path) -> "CLIPaths":
        flex_dir = Path(home) / ".twilio-cli" / "flex"
        return cls(flex_dir=flex_dir, plugins_json=flex_dir / "plugins.json")


@dataclass(frozen=True)
class TemplatePaths:
    """Templates shipped with the package and copied into projects."""

    index_html: Path = TEMPLATES_DIR / "index.html"
    ts_config: Path = TEMPLATES_DIR / "tsconfig.json"
