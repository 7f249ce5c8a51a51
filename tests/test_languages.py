from __future__ import annotations

import pytest

from runbot.core.languages import DEFAULT_LANGUAGES, LanguageRegistry, default_registry, resolve
from runbot.core.types import LanguageEntry
from runbot.errors import LanguageRegistryError


def test_resolve_alias(registry: LanguageRegistry) -> None:
    assert resolve("py3", registry) == "python"


def test_resolve_canonical_name_ignores_case(registry: LanguageRegistry) -> None:
    assert resolve("PyThOn", registry) == "python"
    assert resolve("C++", registry) == "c++"


def test_resolve_every_alias_case_insensitively() -> None:
    registry = default_registry()
    for name, aliases in DEFAULT_LANGUAGES.items():
        assert resolve(name.upper(), registry) == name
        for alias in aliases:
            assert resolve(alias, registry) == name
            assert resolve(alias.upper(), registry) == name


def test_resolve_unknown_and_empty_tags(registry: LanguageRegistry) -> None:
    assert resolve("cobra", registry) is None
    assert resolve("", registry) is None


def test_canonical_name_wins_over_alias() -> None:
    registry = LanguageRegistry([
        LanguageEntry("javascript", ("js",)),
        LanguageEntry("js", ()),
    ])
    assert resolve("JS", registry) == "js"


def test_alias_collision_is_rejected() -> None:
    with pytest.raises(LanguageRegistryError, match="claimed by both"):
        LanguageRegistry.from_mapping({"python": ["py"], "pyth": ["PY"]})


def test_duplicate_canonical_name_is_rejected() -> None:
    with pytest.raises(LanguageRegistryError, match="duplicate"):
        LanguageRegistry([LanguageEntry("python"), LanguageEntry("Python")])


def test_registry_keeps_entry_order(registry: LanguageRegistry) -> None:
    assert registry.names == ["python", "javascript", "c++"]
    assert len(registry) == 3
    assert "PYTHON" in registry
    assert "py" not in registry


def test_from_runtimes_merges_versions() -> None:
    registry = LanguageRegistry.from_runtimes([
        {"language": "python", "version": "2.7.18", "aliases": ["py2"]},
        {"language": "python", "version": "3.12.0", "aliases": ["py", "py3", "py2"]},
        {"language": "bash", "version": "5.2.0", "aliases": ["sh"]},
        {"version": "1.0.0", "aliases": ["nameless"]},
    ])
    assert registry.names == ["python", "bash"]
    entry = next(iter(registry))
    assert entry.aliases == ("py2", "py", "py3")
    assert resolve("sh", registry) == "bash"


def test_default_registry_is_valid() -> None:
    registry = default_registry()
    assert len(registry) == len(DEFAULT_LANGUAGES)
    assert resolve("py3", registry) == "python"
    assert resolve("golang", registry) == "go"
