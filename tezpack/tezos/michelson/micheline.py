"""
Micheline expression model and combinators.

Contract parameters are Micheline trees. The tree is modeled as a small recursive sum type:

- Prim    - primitive application, e.g. `Pair`, `Left`, `Some`, or a type such as `pair`, `nat`
- Int     - integer literal, stored in its decimal string form
- String  - string literal
- Bytes   - byte literal, stored as lowercase hex
- Seq     - sequence, e.g. a list of payouts

Parameter schemas are expressed by composing the combinators below:

>>> pair(nat(1), string("tz1..."), none()).to_micheline()
{'prim': 'Pair', 'args': [{'int': '1'}, {'prim': 'Pair', 'args': [{'string': 'tz1...'}, {'prim': 'None'}]}]}

https://tezos.gitlab.io/shell/micheline.html
"""
from dataclasses import dataclass
from typing import Any, Iterable, TypeAlias, Union


class MichelineDecodeError(Exception):
    """
    Raised when a JSON expression is not a valid Micheline node
    """


@dataclass(slots=True, frozen=True)
class Prim:
    """
    Primitive application node
    """

    prim: str
    args: tuple["Node", ...] = ()

    def to_micheline(self) -> dict[str, Any]:
        if not self.args:
            return {"prim": self.prim}
        return {"prim": self.prim, "args": [arg.to_micheline() for arg in self.args]}


@dataclass(slots=True, frozen=True)
class Int:
    value: str

    def to_micheline(self) -> dict[str, Any]:
        return {"int": self.value}


@dataclass(slots=True, frozen=True)
class String:
    value: str

    def to_micheline(self) -> dict[str, Any]:
        return {"string": self.value}


@dataclass(slots=True, frozen=True)
class Bytes:
    """
    Hex encoded byte literal
    """

    value: str

    def to_micheline(self) -> dict[str, Any]:
        return {"bytes": self.value}

    def __bytes__(self) -> bytes:
        return bytes.fromhex(self.value)


@dataclass(slots=True, frozen=True)
class Seq:
    items: tuple["Node", ...] = ()

    def to_micheline(self) -> list[Any]:
        return [item.to_micheline() for item in self.items]


Node: TypeAlias = Union[Prim, Int, String, Bytes, Seq]


def pair(*nodes: Node) -> Prim:
    """
    Builds a right comb of pairs: pair(a, b, c) == Pair(a, Pair(b, c))

    :exception ValueError: if less than 2 nodes are specified
    """
    if len(nodes) < 2:
        raise ValueError("pair requires at least 2 nodes")
    if len(nodes) == 2:
        return Prim("Pair", nodes)
    return Prim("Pair", (nodes[0], pair(*nodes[1:])))


def left(node: Node) -> Prim:
    return Prim("Left", (node,))


def right(node: Node) -> Prim:
    return Prim("Right", (node,))


def some(node: Node) -> Prim:
    return Prim("Some", (node,))


def none() -> Prim:
    return Prim("None")


def nat(value: Any) -> Int:
    """
    The value is stringified as is, i.e., no numeric validation is applied.
    """
    return Int(f"{value}")


def string(value: Any) -> String:
    return String(f"{value}")


def bytes_(value: bytes | str | Bytes) -> Bytes:
    """
    :param value: raw bytes, a string that is already hex encoded, or a Bytes leaf which is returned as is
    :exception TypeError: for any other value, e.g., a Prim tree
    """
    if isinstance(value, Bytes):
        return value
    if isinstance(value, (bytes, bytearray)):
        return Bytes(bytes(value).hex())
    if isinstance(value, str):
        return Bytes(value)
    raise TypeError(f"cannot encode {type(value).__name__} as Micheline bytes: {value!r}")


def seq(items: Iterable[Node] = ()) -> Seq:
    return Seq(tuple(items))


def prim_type(name: str, *args: Node) -> Prim:
    """
    Michelson type expression, e.g. prim_type("pair", ADDRESS, NAT)
    """
    return Prim(name, args)


NAT = prim_type("nat")
ADDRESS = prim_type("address")


def to_micheline(node: Node) -> dict[str, Any] | list[Any]:
    """
    :return: JSON Micheline expression
    """
    return node.to_micheline()


def from_micheline(expr: Any) -> Node:
    """
    Parses a JSON Micheline expression, e.g., as returned by the node RPC.

    :exception MichelineDecodeError: if the expression is not a Micheline node
    """
    if isinstance(expr, list):
        return Seq(tuple(from_micheline(item) for item in expr))
    if not isinstance(expr, dict):
        raise MichelineDecodeError(f"invalid Micheline expression: {expr!r}")
    if "prim" in expr:
        return Prim(
            expr["prim"],
            tuple(from_micheline(arg) for arg in expr.get("args", [])),
        )
    if "int" in expr:
        return Int(expr["int"])
    if "string" in expr:
        return String(expr["string"])
    if "bytes" in expr:
        return Bytes(expr["bytes"])
    raise MichelineDecodeError(f"invalid Micheline expression: {expr!r}")
