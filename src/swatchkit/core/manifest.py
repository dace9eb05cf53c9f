import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError

CONFIG_FILENAME = "swatchkit.toml"


@dataclass
class TokensConfig:
    """Token definition configuration."""

    input: str | None = None  # Defaults to <input>/tokens


@dataclass
class ProjectConfig:
    """Contents of swatchkit.toml.

    Example:

        [swatchkit]
        input = "swatchkit"
        out_dir = "public/swatchkit"
        css = "css"
        exclude = ["draft-*", "*.wip.html"]
        copy_css = true
        token_pages = true

        [tokens]
        input = "swatchkit/tokens"
    """

    input: str = "swatchkit"
    out_dir: str = "public/swatchkit"
    css: str = "css"
    exclude: list[str] = field(default_factory=list)
    copy_css: bool = True
    token_pages: bool = True
    tokens: TokensConfig = field(default_factory=TokensConfig)
    source: Path | None = None  # File the config was read from


def _expect(value: Any, kind: type | tuple[type, ...], key: str, path: Path) -> Any:
    if not isinstance(value, kind):
        raise ConfigError(f"'{key}' has the wrong type ({type(value).__name__})", path)
    return value


def load_config(config_path: Path | None = None, project_root: Path | None = None) -> ProjectConfig:
    """Load swatchkit.toml.

    An explicit ``config_path`` must exist. Without one, ``swatchkit.toml``
    in ``project_root`` (default: cwd) is used when present and defaults
    otherwise.
    """
    if config_path is None:
        config_path = (project_root or Path.cwd()) / CONFIG_FILENAME
        if not config_path.exists():
            return ProjectConfig()
    elif not config_path.exists():
        raise ConfigError("config file not found", config_path)

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}", config_path) from e

    section = _expect(data.get("swatchkit", {}), dict, "swatchkit", config_path)
    tokens_data = _expect(data.get("tokens", {}), dict, "tokens", config_path)

    exclude = _expect(section.get("exclude", []), list, "exclude", config_path)
    for pattern in exclude:
        _expect(pattern, str, "exclude", config_path)

    tokens_input = tokens_data.get("input")
    if tokens_input is not None:
        _expect(tokens_input, str, "tokens.input", config_path)

    return ProjectConfig(
        input=_expect(section.get("input", "swatchkit"), str, "input", config_path),
        out_dir=_expect(section.get("out_dir", "public/swatchkit"), str, "out_dir", config_path),
        css=_expect(section.get("css", "css"), str, "css", config_path),
        exclude=list(exclude),
        copy_css=_expect(section.get("copy_css", True), bool, "copy_css", config_path),
        token_pages=_expect(section.get("token_pages", True), bool, "token_pages", config_path),
        tokens=TokensConfig(input=tokens_input),
        source=config_path,
    )
