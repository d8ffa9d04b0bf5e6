import pytest

from jabascript.errors import ArityMismatch, UndefinedVariable
from jabascript.interpreter import Interpreter
from jabascript.types import ClosureVal, FunctionVal, to_string


@pytest.fixture
def interp():
    interp = Interpreter(prelude=False)
    interp.run_line("adder = |a| |b| a + b\n")
    return interp


def test_function_literal_is_uncaptured(interp):
    assert isinstance(interp.env.get('adder'), FunctionVal)


def test_currying(interp):
    assert interp.run_line("adder(3)(4)\n") == 7


def test_partial_application_returns_closure(interp):
    add3 = interp.run_line("add3 = adder(3)\n")
    assert isinstance(add3, ClosureVal)
    assert add3.captured['a'] == 3
    assert interp.run_line("add3(4)\n") == 7
    assert interp.run_line("add3(10)\n") == 13


def test_closures_do_not_share_state(interp):
    assert interp.run_line("adder(3)(4)\n") == 7
    assert interp.run_line("adder(10)(1)\n") == 11
    interp.run_line("add3 = adder(3)\n")
    interp.run_line("add10 = adder(10)\n")
    assert interp.run_line("add3(1)\n") == 4
    assert interp.run_line("add10(1)\n") == 11


def test_captured_snapshot_is_read_only(interp):
    add3 = interp.run_line("add3 = adder(3)\n")
    with pytest.raises(TypeError):
        add3.captured['a'] = 99


def test_calling_closure_does_not_mutate_capture():
    interp = Interpreter(prelude=False)
    interp.run_line("counter = |n| || n = n + 1\n")
    interp.run_line("tick = counter(0)\n")
    assert interp.run_line("tick()\n") == 1
    assert interp.run_line("tick()\n") == 1
    assert interp.env.get('tick').captured['n'] == 0


def test_closure_ignores_later_outer_updates():
    interp = Interpreter(prelude=False)
    interp.run_line("k = 1\n")
    interp.run_line("make = || |x| x + k\n")
    interp.run_line("f = make()\n")
    interp.run_line("k = 100\n")
    # k was captured when f was returned from make
    assert interp.run_line("f(1)\n") == 2


def test_uncaptured_function_sees_caller_bindings():
    interp = Interpreter(prelude=False)
    interp.run_line("f = |x| x + k\n")
    with pytest.raises(UndefinedVariable):
        interp.run_line("f(1)\n")
    interp.run_line("k = 5\n")
    assert interp.run_line("f(1)\n") == 6


def test_parameters_shadow_captured_bindings():
    interp = Interpreter(prelude=False)
    interp.run_line("outer = |a| |a| a * 2\n")
    assert interp.run_line("outer(1)(21)\n") == 42


def test_three_level_currying():
    interp = Interpreter(prelude=False)
    interp.run_line("add3 = |a| |b| |c| a + b + c\n")
    assert interp.run_line("add3(1)(2)(3)\n") == 6
    assert interp.run_line("step = add3(1)(2)\n") is not None
    assert interp.run_line("step(30)\n") == 33


def test_higher_order_functions():
    interp = Interpreter(prelude=False)
    interp.run_line("twice = |f x| f(f(x))\n")
    interp.run_line("inc = |x| x + 1\n")
    assert interp.run_line("twice(inc 5)\n") == 7
    interp.run_line("compose = |f g| |x| f(g(x))\n")
    interp.run_line("double = |x| x * 2\n")
    assert interp.run_line("compose(inc double)(10)\n") == 21


def test_closure_arity(interp):
    interp.run_line("add3 = adder(3)\n")
    with pytest.raises(ArityMismatch) as excinfo:
        interp.run_line("add3(1 2)\n")
    assert excinfo.value.expected == 1
    assert excinfo.value.actual == 2


def test_closures_display_as_placeholder(interp):
    assert to_string(interp.run_line("adder(1)\n")) == '[Function]'
    assert to_string(interp.env.get('adder')) == '[Function]'
