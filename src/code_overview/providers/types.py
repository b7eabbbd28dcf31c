"""Type corpus provider: type declarations read from C-family source.

Declarations are found with regular expressions rather than a compiler, so
the provider sees what the source says, not what the build produces:

- ``class``, ``interface``, ``struct``, ``enum``, ``record`` and
  ``delegate`` declarations are recognised, nested ones included.
- A type is identified by its namespace, enclosing types and name. Two
  nested ``Settings`` classes in different behaviours are two types; only
  ``partial`` declarations of the same qualified name merge into one.
- Delegates are classes deriving from ``MulticastDelegate``.
- The first base of a class is its parent unless it is a known interface
  or is named like one (``I`` followed by an uppercase letter). Bases are
  looked up by simple name.
- Parents declared outside the corpus (``MonoBehaviour``) end the chain.
  Every class chain finishes at ``object``.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional, Union

from ..logging_config import get_logger
from ..scanning.models import SourceFile, TypeDescriptor

logger = get_logger(__name__)

ROOT_TYPE = "object"
DELEGATE_ANCESTORS = ("MulticastDelegate", "Delegate", ROOT_TYPE)

# Leftmost token wins, so "/*" inside a string never opens a comment
_NOISE = re.compile(
    r"(?P<comment>//[^\n]*|/\*.*?\*/)"
    r'|(?P<literal>\$?@\$?"(?:[^"]|"")*"|\$?"(?:[^"\\\n]|\\.)*"'
    r"|'(?:[^'\\\n]|\\.)*')",
    re.DOTALL,
)

_MODIFIERS = (
    "public|private|protected|internal|static|abstract|sealed|partial"
    "|unsafe|new|readonly|ref|file"
)

# A declaration starts a line or follows a brace or semicolon
_LEAD = r"(?:^|(?<=[{};]))[ \t]*(?:\[[^\]\n]*\][ \t]*)*"

_DECLARATION = re.compile(
    _LEAD
    + rf"(?P<modifiers>(?:(?:{_MODIFIERS})\s+)*)"
    r"(?P<kind>record\s+struct|record\s+class|record|class|interface|struct|enum)\s+"
    r"(?P<name>[A-Za-z_]\w*)"
    r"(?:\s*<[^>{;]*>)?"
    r"(?:\s*\([^){;]*\))?"
    r"(?:\s*:\s*(?P<bases>[^{;]+?))?"
    r"\s*(?:\bwhere\b[^{;]*)?[{;]",
    re.MULTILINE,
)

_DELEGATE = re.compile(
    _LEAD
    + rf"(?:(?:{_MODIFIERS})\s+)*"
    r"delegate\s+[\w.]+(?:\s*<[^{;(]*?>)?(?:\s*\[[,\s]*\])*\??\s+"
    r"(?P<name>[A-Za-z_]\w*)\s*(?:<[^>{;(]*>)?\s*\(",
    re.MULTILINE,
)

_NAMESPACE = re.compile(
    _LEAD + r"namespace\s+(?P<name>[A-Za-z_][\w.]*)\s*(?P<end>[{;])",
    re.MULTILINE,
)

_BRACE = re.compile(r"[{}]")

_INTERFACE_NAME = re.compile(r"^I[A-Z]")


@dataclass
class _Declaration:
    name: str
    kind: str
    bases: list[str]
    partial: bool = False
    scope: tuple[str, ...] = field(default_factory=tuple)

    @property
    def key(self) -> str:
        return ".".join((*self.scope, self.name))


def _strip_noise(content: str) -> str:
    """Blank out comments and literals. Newlines inside comments are kept."""

    def _blank(match: re.Match) -> str:
        if match.group("literal") is not None:
            return '""'
        return "\n" * match.group().count("\n") or " "

    return _NOISE.sub(_blank, content)


def _simple_name(base: str) -> str:
    """``UnityEngine.MonoBehaviour`` -> ``MonoBehaviour``, ``List<int>`` -> ``List``."""
    base = base.split("<", 1)[0].strip()
    return base.rsplit(".", 1)[-1]


def _split_bases(bases: str) -> list[str]:
    """Split a base list on commas outside generic brackets."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in bases:
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
        elif char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [_simple_name(p) for p in parts if p.strip()]


def _normalize_kind(kind: str) -> str:
    kind = " ".join(kind.split())
    if kind in ("record", "record class"):
        return "class"
    if kind == "record struct":
        return "struct"
    return kind


class DeclarationTypeProvider:
    """Builds TypeDescriptors for every type declared in a file corpus."""

    def load(self, files: Iterable[SourceFile]) -> list[TypeDescriptor]:
        """
        Parse declarations from the files and resolve their ancestor chains.

        Args:
            files: Source files to read declarations from

        Returns:
            One descriptor per declared type, in declaration order
        """
        declarations: list[_Declaration] = []
        partials: dict[str, _Declaration] = {}

        for file in files:
            if not file.content:
                continue
            for decl in self._parse(file.content):
                if decl.partial:
                    existing = partials.get(decl.key)
                    if existing is not None:
                        if not existing.bases and decl.bases:
                            existing.bases = decl.bases
                        continue
                    partials[decl.key] = decl
                declarations.append(decl)

        interfaces = {d.name for d in declarations if d.kind == "interface"}
        first_parents = [
            self._parent_of(d, interfaces) if d.kind == "class" else None for d in declarations
        ]
        parents: dict[str, str] = {}
        for decl, parent in zip(declarations, first_parents):
            if parent is not None:
                parents.setdefault(decl.name, parent)

        descriptors = []
        for decl, parent in zip(declarations, first_parents):
            if decl.kind == "delegate":
                ancestors = DELEGATE_ANCESTORS
            elif decl.kind == "class":
                ancestors = self._ancestors(decl.name, parent, parents)
            else:
                ancestors = ()
            descriptors.append(
                TypeDescriptor(
                    name=decl.name,
                    is_interface=decl.kind == "interface",
                    is_class=decl.kind in ("class", "delegate"),
                    ancestors=ancestors,
                    kind=decl.kind,
                )
            )

        logger.info(f"Resolved {len(descriptors)} types")
        return descriptors

    @staticmethod
    def _parse(content: str) -> list[_Declaration]:
        text = _strip_noise(content)

        # Opening brace position -> name of the namespace or type it opens
        opens: dict[int, str] = {}
        outer: list[str] = []
        for match in _NAMESPACE.finditer(text):
            if match.group("end") == "{":
                opens[match.end() - 1] = match.group("name")
            else:
                outer.append(match.group("name"))

        events: list[tuple[int, Union[str, _Declaration]]] = []
        for match in _DECLARATION.finditer(text):
            bases = match.group("bases")
            decl = _Declaration(
                name=match.group("name"),
                kind=_normalize_kind(match.group("kind")),
                bases=_split_bases(bases) if bases else [],
                partial="partial" in match.group("modifiers").split(),
            )
            events.append((match.start(), decl))
            if text[match.end() - 1] == "{":
                opens[match.end() - 1] = decl.name
        for match in _DELEGATE.finditer(text):
            delegate = _Declaration(name=match.group("name"), kind="delegate", bases=[])
            events.append((match.start(), delegate))
        events.extend((match.start(), match.group()) for match in _BRACE.finditer(text))
        events.sort(key=lambda event: event[0])

        found = []
        stack: list[Optional[str]] = []
        for position, item in events:
            if isinstance(item, _Declaration):
                item.scope = (*outer, *(name for name in stack if name))
                found.append(item)
            elif item == "{":
                stack.append(opens.get(position))
            elif stack:
                stack.pop()
        return found

    @staticmethod
    def _parent_of(decl: _Declaration, interfaces: set[str]) -> Optional[str]:
        if not decl.bases:
            return None
        first = decl.bases[0]
        if first in interfaces or _INTERFACE_NAME.match(first):
            return None
        return first

    @staticmethod
    def _ancestors(name: str, parent: Optional[str], parents: dict[str, str]) -> tuple[str, ...]:
        chain: list[str] = []
        seen = {name}
        while parent is not None:
            if parent in seen:
                logger.warning(f"Inheritance cycle through {parent} cut while resolving {name}")
                break
            chain.append(parent)
            seen.add(parent)
            parent = parents.get(parent)
        if not chain or chain[-1] != ROOT_TYPE:
            chain.append(ROOT_TYPE)
        return tuple(chain)
