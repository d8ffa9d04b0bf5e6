"""JSON serialization/deserialization for JabaScript expression trees.

This module converts between the expression dataclasses and plain Python
dict/list structures suitable for JSON encoding. Every node type round
trips; parameter and argument tuples are stored as JSON lists.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Assignment,
    Binary,
    FunctionCall,
    FunctionDefinition,
    Identifier,
    IntegerLiteral,
    Node,
    Ternary,
    Unary,
)


def ast_to_obj(node: Node) -> Dict[str, Any]:
    if isinstance(node, IntegerLiteral):
        return {"type": "IntegerLiteral", "value": node.value}
    if isinstance(node, Identifier):
        return {"type": "Identifier", "name": node.name}
    if isinstance(node, Unary):
        return {"type": "Unary", "sign": node.sign, "operand": ast_to_obj(node.operand)}
    if isinstance(node, Binary):
        return {"type": "Binary", "op": node.op, "left": ast_to_obj(node.left), "right": ast_to_obj(node.right)}
    if isinstance(node, Ternary):
        return {
            "type": "Ternary",
            "condition": ast_to_obj(node.condition),
            "then_branch": ast_to_obj(node.then_branch),
            "else_branch": ast_to_obj(node.else_branch),
        }
    if isinstance(node, Assignment):
        return {"type": "Assignment", "name": node.name, "value": ast_to_obj(node.value)}
    if isinstance(node, FunctionDefinition):
        return {"type": "FunctionDefinition", "params": list(node.params), "body": ast_to_obj(node.body)}
    if isinstance(node, FunctionCall):
        return {
            "type": "FunctionCall",
            "callee": ast_to_obj(node.callee),
            "args": [ast_to_obj(a) for a in node.args],
        }

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Node:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "IntegerLiteral":
        return IntegerLiteral(value=int(obj["value"]))
    if t == "Identifier":
        return Identifier(name=obj["name"])
    if t == "Unary":
        return Unary(sign=int(obj["sign"]), operand=ast_from_obj(obj["operand"]))
    if t == "Binary":
        return Binary(op=obj["op"], left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]))
    if t == "Ternary":
        return Ternary(
            condition=ast_from_obj(obj["condition"]),
            then_branch=ast_from_obj(obj["then_branch"]),
            else_branch=ast_from_obj(obj["else_branch"]),
        )
    if t == "Assignment":
        return Assignment(name=obj["name"], value=ast_from_obj(obj["value"]))
    if t == "FunctionDefinition":
        return FunctionDefinition(params=tuple(obj["params"]), body=ast_from_obj(obj["body"]))
    if t == "FunctionCall":
        return FunctionCall(
            callee=ast_from_obj(obj["callee"]),
            args=tuple(ast_from_obj(a) for a in obj["args"]),
        )

    raise ValueError(f"Unknown AST node type: {t}")
