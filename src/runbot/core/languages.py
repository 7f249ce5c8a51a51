"""Language registry and tag resolution."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from runbot.core.types import LanguageEntry
from runbot.errors import LanguageRegistryError


class LanguageRegistry:
    """Ordered, immutable set of supported languages.

    Canonical names must be unique and an alias may belong to one entry only.
    An alias that equals another entry's canonical name is accepted since
    canonical matches are checked first.
    """

    def __init__(self, entries: Iterable[LanguageEntry]) -> None:
        self._entries: tuple[LanguageEntry, ...] = tuple(entries)
        self._canonical: dict[str, str] = {}
        self._aliases: dict[str, str] = {}

        for entry in self._entries:
            key = entry.canonical_name.casefold()
            if not key:
                raise LanguageRegistryError("language name must not be empty")
            if key in self._canonical:
                raise LanguageRegistryError(f"duplicate language name: {entry.canonical_name}")
            self._canonical[key] = entry.canonical_name

        for entry in self._entries:
            for alias in entry.aliases:
                alias_key = alias.casefold()
                if not alias_key or alias_key == entry.canonical_name.casefold():
                    continue
                owner = self._aliases.get(alias_key)
                if owner is not None and owner != entry.canonical_name:
                    raise LanguageRegistryError(f"alias '{alias}' is claimed by both '{owner}' and '{entry.canonical_name}'")
                self._aliases[alias_key] = entry.canonical_name

    @classmethod
    def from_mapping(cls, data: Mapping[str, Sequence[str]]) -> LanguageRegistry:
        return cls(LanguageEntry(name, tuple(aliases)) for name, aliases in data.items())

    @classmethod
    def from_runtimes(cls, runtimes: Iterable[Mapping[str, Any]]) -> LanguageRegistry:
        """Build a registry from a runtimes catalog.

        The catalog lists one item per installed version, so entries for the
        same language are merged in catalog order.
        """

        merged: dict[str, list[str]] = {}
        for runtime in runtimes:
            name = str(runtime.get("language") or "").strip()
            if not name:
                continue
            aliases = merged.setdefault(name, [])
            for alias in runtime.get("aliases") or ():
                alias = str(alias).strip()
                if alias and alias not in aliases:
                    aliases.append(alias)
        return cls.from_mapping(merged)

    def __iter__(self) -> Iterator[LanguageEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._canonical

    @property
    def names(self) -> list[str]:
        return [entry.canonical_name for entry in self._entries]

    def resolve(self, tag: str) -> str | None:
        """Resolve a user-supplied tag to a canonical language name.

        Canonical names win over aliases; comparison ignores case. Returns None
        when nothing matches, including for an empty tag.
        """

        key = tag.casefold()
        if not key:
            return None
        canonical = self._canonical.get(key)
        if canonical is not None:
            return canonical
        return self._aliases.get(key)


def resolve(tag: str, registry: LanguageRegistry) -> str | None:
    return registry.resolve(tag)


# Language list served by the public execution backend, with the aliases
# people commonly type in chat.
DEFAULT_LANGUAGES: dict[str, tuple[str, ...]] = {
    "awk": (),
    "bash": ("sh",),
    "befunge93": ("b93",),
    "brainfuck": ("bf",),
    "c": ("gcc",),
    "c++": ("cpp", "g++"),
    "cjam": (),
    "clojure": ("clj",),
    "cobol": ("cob",),
    "coffeescript": ("coffee",),
    "cow": (),
    "crystal": ("cr",),
    "csharp": ("cs", "c#"),
    "csharp.net": ("dotnet", "c#.net"),
    "d": ("dmd",),
    "dart": (),
    "dash": (),
    "dragon": (),
    "elixir": ("ex", "exs"),
    "emacs": ("elisp", "el"),
    "erlang": ("erl",),
    "file": (),
    "forte": (),
    "fortran": ("f90", "f95"),
    "freebasic": ("fbc",),
    "fsharp.net": ("fsharp", "fs", "f#"),
    "fsi": (),
    "go": ("golang",),
    "golfscript": ("golfs",),
    "groovy": ("gvy",),
    "haskell": ("hs",),
    "husk": (),
    "iverilog": ("verilog",),
    "japt": (),
    "java": (),
    "javascript": ("js", "node", "node-js"),
    "jelly": (),
    "julia": ("jl",),
    "kotlin": ("kt",),
    "lisp": ("cl", "sbcl"),
    "llvm_ir": ("llvm", "ll"),
    "lolcode": ("lol",),
    "lua": (),
    "nasm": ("asm",),
    "nasm64": ("asm64",),
    "nim": (),
    "ocaml": ("ml",),
    "octave": ("matlab", "m"),
    "osabie": ("05ab1e",),
    "paradoc": (),
    "pascal": ("pas", "freepascal"),
    "perl": ("pl",),
    "php": (),
    "ponylang": ("pony",),
    "powershell": ("ps", "pwsh", "ps1"),
    "prolog": (),
    "pure": (),
    "pyth": (),
    "python": ("py", "py3", "python3"),
    "python2": ("py2",),
    "racket": ("rkt",),
    "raku": ("perl6", "rakudo"),
    "retina": (),
    "rockstar": ("rock",),
    "rscript": ("r",),
    "ruby": ("rb",),
    "rust": ("rs",),
    "scala": ("sc",),
    "sqlite3": ("sqlite", "sql"),
    "swift": (),
    "typescript": ("ts",),
    "basic": ("vb",),
    "basic.net": ("vb.net", "visual-basic"),
    "vlang": ("v",),
    "vyxal": (),
    "yeethon": ("yeethon3",),
    "zig": (),
}


def default_registry() -> LanguageRegistry:
    return LanguageRegistry.from_mapping(DEFAULT_LANGUAGES)
