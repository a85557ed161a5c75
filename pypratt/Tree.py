from dataclasses import dataclass
from typing import Any, Optional


# Syntax tree built by the tree grammars. str() prints prefix style ala
# Lisp on one line, pp() prints the same tree indented.

@dataclass(frozen=True)
class NumberNode:
    number: Any

    def __str__(self) -> str:
        return str(self.number)

    def pp(self, indent: str = "") -> str:
        return f"{indent}{self.number}"


@dataclass(frozen=True)
class UnaryNode:
    operator: str
    node: Any

    def __str__(self) -> str:
        return f"({self.operator} {self.node})"

    def pp(self, indent: str = "") -> str:
        newindent = indent + "  "
        return f"{indent}({self.operator}\n{self.node.pp(newindent)})"


@dataclass(frozen=True)
class BinaryNode:
    operator: str
    left: Any
    right: Any

    def __str__(self) -> str:
        return f"({self.operator} {self.left} {self.right})"

    def pp(self, indent: str = "") -> str:
        newindent = indent + "  "
        return f"{indent}({self.operator}\n{self.left.pp(newindent)}\n{self.right.pp(newindent)})"


@dataclass(frozen=True)
class IfNode:
    """A conditional; `otherwise` is None when the else branch was omitted."""
    cond: Any
    then: Any
    otherwise: Optional[Any] = None

    def __str__(self) -> str:
        if self.otherwise is None:
            return f"(if {self.cond} {self.then})"
        return f"(if {self.cond} {self.then} {self.otherwise})"

    def pp(self, indent: str = "") -> str:
        newindent = indent + "  "
        parts = [self.cond.pp(newindent), self.then.pp(newindent)]
        if self.otherwise is not None:
            parts.append(self.otherwise.pp(newindent))
        body = "\n".join(parts)
        return f"{indent}(if\n{body})"


@dataclass(frozen=True)
class NameNode:
    name: str

    def __str__(self) -> str:
        return self.name

    def pp(self, indent: str = "") -> str:
        return f"{indent}{self.name}"
