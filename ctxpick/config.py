import logging
import os
from contextvars import ContextVar
from dataclasses import dataclass, field, fields
from pathlib import Path

import tomlkit
from platformdirs import user_config_dir
from tomlkit.exceptions import TOMLKitError
from typing_extensions import Self

from .constants import DEFAULT_PROVIDER, PROMPT_TITLE
from .paths import get_project_root
from .util import path_with_tilde

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a config file can't be parsed or has values of the wrong type."""


def _options_from_dict(cls, name: str, doc: dict):
    known = {f.name for f in fields(cls)}
    if unknown := set(doc) - known:
        logger.warning(f"Unknown keys in [selector.{name}] config: {sorted(unknown)}")
    return cls(**{k: v for k, v in doc.items() if k in known})


@dataclass
class NativeOptions:
    """Options for the built-in list picker."""

    prompt: str = f"{PROMPT_TITLE}:"


@dataclass
class FzfOptions:
    """Options for the fzf picker."""

    prompt: str = f"{PROMPT_TITLE}> "
    height: str = "40%"
    extra_args: list[str] = field(default_factory=list)


@dataclass
class PromptToolkitOptions:
    """Options for the prompt_toolkit fuzzy-completion picker."""

    prompt: str = f"{PROMPT_TITLE}> "
    complete_while_typing: bool = True


@dataclass
class SelectorConfig:
    """File selector configuration.

    Loaded from the ``[selector]`` table of a ``ctxpick.toml``::

        [selector]
        provider = "fzf"

        [selector.fzf]
        height = "50%"
        extra_args = ["--reverse"]

    The provider is not validated here, an unknown one is reported when a
    picker is opened.
    """

    provider: str = DEFAULT_PROVIDER
    native: NativeOptions = field(default_factory=NativeOptions)
    fzf: FzfOptions = field(default_factory=FzfOptions)
    prompt_toolkit: PromptToolkitOptions = field(default_factory=PromptToolkitOptions)

    @classmethod
    def from_dict(cls, doc: dict) -> Self:
        """Create a SelectorConfig from a dictionary. Warns about unknown keys."""
        doc = dict(doc)
        provider = doc.pop("provider", DEFAULT_PROVIDER)
        if not isinstance(provider, str):
            raise ConfigError(f"selector.provider must be a string, got {provider!r}")
        try:
            native = _options_from_dict(NativeOptions, "native", doc.pop("native", {}))
            fzf = _options_from_dict(FzfOptions, "fzf", doc.pop("fzf", {}))
            prompt_toolkit = _options_from_dict(
                PromptToolkitOptions, "prompt_toolkit", doc.pop("prompt_toolkit", {})
            )
        except TypeError as e:
            raise ConfigError(f"Invalid selector options: {e}") from e
        if doc:
            logger.warning(f"Unknown keys in selector config: {sorted(doc)}")
        return cls(
            provider=provider, native=native, fzf=fzf, prompt_toolkit=prompt_toolkit
        )


@dataclass
class Config:
    """Resolved configuration for one workspace."""

    selector: SelectorConfig = field(default_factory=SelectorConfig)
    workspace: Path | None = None

    @classmethod
    def from_workspace(cls, workspace: Path | None = None) -> Self:
        """Load the project config (``ctxpick.toml``) or fall back to the user config."""
        workspace = workspace or get_project_root()
        doc: dict = {}
        for path in (workspace / "ctxpick.toml", user_config_path()):
            if path.exists():
                doc = load_toml(path)
                logger.debug(f"Using configuration at {path_with_tilde(path)}")
                break
        selector = SelectorConfig.from_dict(doc.pop("selector", {}))
        if doc:
            logger.warning(f"Unknown keys in config: {sorted(doc)}")
        if provider := os.environ.get("CTXPICK_PROVIDER"):
            selector.provider = provider
        return cls(selector=selector, workspace=workspace)


def user_config_path() -> Path:
    return Path(user_config_dir("ctxpick")) / "config.toml"


def load_toml(path: Path) -> dict:
    try:
        with open(path) as f:
            return tomlkit.load(f).unwrap()
    except TOMLKitError as e:
        raise ConfigError(f"Failed to parse {path_with_tilde(path)}: {e}") from e


_config_var: ContextVar[Config | None] = ContextVar("config", default=None)


def get_config() -> Config:
    """Get the current configuration, loading it on first use in this context."""
    config = _config_var.get()
    if config is None:
        config = Config.from_workspace()
        _config_var.set(config)
    return config


def set_config(config: Config | None) -> None:
    _config_var.set(config)
