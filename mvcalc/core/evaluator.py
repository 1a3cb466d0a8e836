# -*- coding: utf-8 -*-
"""
Expression Evaluation
=====================

The kernel never parses expressions itself. Every numerical routine talks to an
``ExpressionEvaluator``: an object that binds variable values and turns an
expression string into a float, or raises ``EvaluationError``.

Two evaluators ship with the package:

- SympyEvaluator: parses text with SymPy and compiles it with ``lambdify``
  against the ``math`` module. Compiled functions are cached per expression.
- FunctionEvaluator: maps expression strings to plain Python callables. Useful
  as an in-memory stub in tests, or when the caller already has the function.

Syntax accepted by SympyEvaluator:
    - Operators: +  -  *  /  ^  (``^`` is power), unary minus, parentheses
    - Functions: sin, cos, tan, exp, sqrt, log (natural), ln, abs
    - Constants: pi, e
    - Explicit multiplication only: 2*x, not 2x

Anything else (conditionals, attribute access, other calls) is rejected with
``EvaluationError`` before SymPy sees it.
"""

import ast
import inspect
import logging
import math
from typing import Callable, Dict, Mapping, Optional, Protocol, Tuple

import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    parse_expr,
    standard_transformations,
)

logger = logging.getLogger(__name__)


class MvcalcError(Exception):
    """Base class for all errors raised by mvcalc."""


class EvaluationError(MvcalcError):
    """
    Raised when an expression cannot be evaluated at a given binding.

    Covers malformed syntax, unbound variables, division by zero, domain
    errors (log of a negative number) and complex-valued results.

    Attributes:
        expression: The expression text that failed
    """

    def __init__(self, message: str, expression: str = ""):
        super().__init__(message)
        self.expression = expression


class ExpressionEvaluator(Protocol):
    """Contract every evaluator fulfils."""

    def evaluate(self, expression: str, bindings: Mapping[str, float]) -> float:
        ...


# =============================================================================
# SymPy-backed evaluator
# =============================================================================

_TRANSFORMATIONS = standard_transformations + (convert_xor,)

_LOCAL_NAMES = {
    "e": sp.E,
    "pi": sp.pi,
    "ln": sp.log,
    "abs": sp.Abs,
}


_FUNCTIONS = frozenset({"sin", "cos", "tan", "exp", "sqrt", "log", "ln", "abs"})

_ALLOWED_NODES = (
    ast.Expression, ast.BinOp, ast.UnaryOp, ast.Call, ast.Name, ast.Load, ast.Constant,
    ast.Add, ast.Sub, ast.Mult, ast.Div, ast.Pow, ast.BitXor, ast.USub, ast.UAdd,
)


def _check_grammar(expression: str) -> None:
    """
    Reject anything outside the arithmetic grammar before SymPy sees it.

    ``parse_expr`` runs its input as Python, so conditionals, attribute
    access, comprehensions and arbitrary calls would otherwise get through.
    """
    try:
        tree = ast.parse(expression, mode="eval")
    except SyntaxError as exc:
        raise EvaluationError(f"Cannot parse expression {expression!r}: {exc}", expression) from exc

    for node in ast.walk(tree):
        if not isinstance(node, _ALLOWED_NODES):
            raise EvaluationError(
                f"Unsupported syntax {type(node).__name__} in {expression!r}", expression
            )
        if isinstance(node, ast.Constant) and not isinstance(node.value, (int, float)):
            raise EvaluationError(f"Unsupported constant in {expression!r}", expression)
        if isinstance(node, ast.Call) and (
            not isinstance(node.func, ast.Name)
            or node.func.id not in _FUNCTIONS
            or node.keywords
        ):
            raise EvaluationError(f"Unsupported function call in {expression!r}", expression)


class _CompiledExpression:
    """A parsed expression and its lambdified callable."""

    __slots__ = ("text", "variables", "function")

    def __init__(self, text: str, variables: Tuple[str, ...], function: Callable[..., float]):
        self.text = text
        self.variables = variables
        self.function = function


class SympyEvaluator:
    """
    Evaluates expression strings with SymPy.

    Parsing uses ``evaluate=False`` so that forms such as ``x/x`` or
    ``(x^2 - y^2)/(x - y)`` keep their singularity instead of being
    simplified away.

    Example:
        >>> evaluator = SympyEvaluator()
        >>> evaluator.evaluate("x^2 * y + y^3", {"x": 1.0, "y": 2.0})
        10.0
    """

    def __init__(self):
        self._cache: Dict[str, _CompiledExpression] = {}

    def compile(self, expression: str) -> _CompiledExpression:
        """Parse and lambdify ``expression``, reusing a cached result if present."""
        compiled = self._cache.get(expression)
        if compiled is not None:
            return compiled

        _check_grammar(expression)
        try:
            parsed = parse_expr(
                expression,
                local_dict=dict(_LOCAL_NAMES),
                transformations=_TRANSFORMATIONS,
                evaluate=False,
            )
        except Exception as exc:
            raise EvaluationError(
                f"Cannot parse expression {expression!r}: {exc}", expression
            ) from exc

        if not isinstance(parsed, sp.Expr):
            raise EvaluationError(
                f"Expression {expression!r} is not a scalar expression", expression
            )

        symbols = sorted(parsed.free_symbols, key=lambda s: s.name)
        try:
            function = sp.lambdify(symbols, parsed, modules="math")
        except Exception as exc:
            raise EvaluationError(
                f"Cannot compile expression {expression!r}: {exc}", expression
            ) from exc

        compiled = _CompiledExpression(
            text=expression,
            variables=tuple(s.name for s in symbols),
            function=function,
        )
        self._cache[expression] = compiled
        logger.debug("Compiled %r with variables %s", expression, compiled.variables)
        return compiled

    def evaluate(self, expression: str, bindings: Mapping[str, float]) -> float:
        compiled = self.compile(expression)

        missing = [name for name in compiled.variables if name not in bindings]
        if missing:
            raise EvaluationError(
                f"Unbound variable(s) {', '.join(missing)} in {expression!r}", expression
            )

        args = [float(bindings[name]) for name in compiled.variables]
        try:
            value = compiled.function(*args)
        except (ArithmeticError, ValueError, TypeError, NameError) as exc:
            raise EvaluationError(
                f"Cannot evaluate {expression!r} at {dict(bindings)}: {exc}", expression
            ) from exc

        return _to_real(value, expression)

    def clear_cache(self) -> None:
        """Drop every compiled expression."""
        self._cache.clear()


def _to_real(value, expression: str) -> float:
    """Coerce an evaluation result to float, rejecting complex values."""
    if isinstance(value, complex):
        if value.imag != 0.0:
            raise EvaluationError(
                f"Expression {expression!r} has a complex value {value}", expression
            )
        value = value.real
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise EvaluationError(
            f"Expression {expression!r} did not evaluate to a number: {value!r}", expression
        ) from exc


# =============================================================================
# Callable-backed evaluator
# =============================================================================

class FunctionEvaluator:
    """
    Evaluator backed by Python callables.

    Each registered callable receives the bindings its signature declares;
    extra bindings are not passed. Builtins without a signature and callables
    taking ``*args`` receive every binding positionally. Python arithmetic and
    type errors are reported as ``EvaluationError`` as in the SymPy evaluator.

    Example:
        >>> evaluator = FunctionEvaluator({"saddle": lambda x, y: x**2 - y**2})
        >>> evaluator.evaluate("saddle", {"x": 1.0, "y": 2.0})
        -3.0
    """

    def __init__(self, functions: Optional[Mapping[str, Callable[..., float]]] = None):
        self._functions: Dict[str, Callable[..., float]] = dict(functions or {})

    def register(self, expression: str, function: Callable[..., float]) -> None:
        """Register ``function`` under the name ``expression``."""
        self._functions[expression] = function

    def evaluate(self, expression: str, bindings: Mapping[str, float]) -> float:
        function = self._functions.get(expression)
        if function is None:
            raise EvaluationError(f"Unknown expression {expression!r}", expression)

        args, kwargs = _call_arguments(function, expression, bindings)
        try:
            value = function(*args, **kwargs)
        except (ArithmeticError, ValueError, TypeError) as exc:
            raise EvaluationError(
                f"Cannot evaluate {expression!r} at {dict(bindings)}: {exc}", expression
            ) from exc

        return _to_real(value, expression)


def _call_arguments(
    function: Callable[..., float],
    expression: str,
    bindings: Mapping[str, float],
) -> Tuple[tuple, Dict[str, float]]:
    """
    Split ``bindings`` into the arguments ``function`` declares.

    Callables without an inspectable signature, or taking ``*args`` (such as
    ``math.hypot``), receive every binding positionally in x, y, z order.
    """
    try:
        parameters = list(inspect.signature(function).parameters.values())
    except (TypeError, ValueError):
        parameters = None
    if parameters is None or any(p.kind is p.VAR_POSITIONAL for p in parameters):
        return tuple(bindings.values()), {}

    args, kwargs, missing = [], {}, []
    for p in parameters:
        if p.kind is p.VAR_KEYWORD:
            continue
        if p.name not in bindings:
            if p.default is p.empty:
                missing.append(p.name)
            continue
        if p.kind is p.POSITIONAL_ONLY:
            args.append(bindings[p.name])
        else:
            kwargs[p.name] = bindings[p.name]

    if missing:
        raise EvaluationError(
            f"Unbound variable(s) {', '.join(missing)} in {expression!r}", expression
        )
    return tuple(args), kwargs


# =============================================================================
# Helpers
# =============================================================================

_default_evaluator: Optional[SympyEvaluator] = None


def default_evaluator() -> SympyEvaluator:
    """Shared SympyEvaluator used when callers do not inject one."""
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = SympyEvaluator()
    return _default_evaluator


def evaluate_or_nan(
    evaluator: Optional[ExpressionEvaluator],
    expression: str,
    bindings: Mapping[str, float],
) -> float:
    """
    Evaluate ``expression``, returning NaN where it is undefined.

    This is the only place where ``EvaluationError`` is turned into an
    undefined value, so batch walks can skip bad points and keep going.
    """
    evaluator = evaluator or default_evaluator()
    try:
        return evaluator.evaluate(expression, bindings)
    except EvaluationError as exc:
        logger.debug("Undefined value: %s", exc)
        return math.nan
