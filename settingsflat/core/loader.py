from __future__ import annotations
import importlib
import pkgutil
from typing import Dict, List, Type

from ..formatters.base import FormatterPlugin


def _discover_package_classes(pkg, base_cls) -> Dict[str, Type]:
    discovered: Dict[str, Type] = {}
    for m in pkgutil.iter_modules(pkg.__path__, pkg.__name__ + "."):
        module = importlib.import_module(m.name)
        for attr_name in dir(module):
            obj = getattr(module, attr_name)
            if isinstance(obj, type) and issubclass(obj, base_cls) and obj is not base_cls:
                name = getattr(obj, "NAME", obj.__name__).lower()
                discovered[name] = obj
    return discovered


def discover_formatter_plugins() -> Dict[str, FormatterPlugin]:
    from .. import formatters as formatters_pkg  # lazy import
    classes = _discover_package_classes(formatters_pkg, FormatterPlugin)
    return {name: cls() for name, cls in sorted(classes.items())}


def formatter_choices(plugins: Dict[str, FormatterPlugin]) -> List[str]:
    names: List[str] = []
    for name, plugin in plugins.items():
        names.append(name)
        names.extend(alias.lower() for alias in plugin.ALIASES)
    return names


def describe_formatters(plugins: Dict[str, FormatterPlugin]) -> List[str]:
    lines: List[str] = []
    for name, plugin in plugins.items():
        label = name
        if plugin.ALIASES:
            label += f" (aliases: {', '.join(plugin.ALIASES)})"
        lines.append(f"  {label}: {plugin.DESCRIPTION}")
    return lines


def select_formatter(plugins: Dict[str, FormatterPlugin], selector: str) -> FormatterPlugin:
    """Return the formatter whose NAME or alias matches ``selector``.

    Matching ignores case, surrounding blanks, ``-`` and ``_`` so that
    ``DockerCompose``, ``docker_compose`` and ``docker-compose`` agree.
    Raises KeyError for an unknown selector.
    """
    wanted = _normalize(selector)
    for name, plugin in plugins.items():
        if wanted == _normalize(name) or any(wanted == _normalize(a) for a in plugin.ALIASES):
            return plugin
    raise KeyError(selector)


def _normalize(name: str) -> str:
    return (name or "").strip().lower().replace("-", "").replace("_", "")
