"""Jinja2 environment used to render generated modules."""

from __future__ import annotations

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
)

from terraformer.config import GeneratorConfig
from terraformer.emit.filters import FILTERS


def create_environment(config: GeneratorConfig | None = None) -> Environment:
    """Create the template environment.

    Templates from ``config.template_dir`` take precedence over the
    built-in ones, so a single template can be overridden.

    Args:
    ----
        config: Generator configuration.

    Returns:
    -------
        Environment with strict undefined handling and the custom filters.

    """
    config = config or GeneratorConfig()

    loader: BaseLoader = PackageLoader("terraformer.emit", "templates")
    if config.template_dir is not None:
        loader = ChoiceLoader([FileSystemLoader(str(config.template_dir)), loader])

    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters.update(FILTERS)
    return env
