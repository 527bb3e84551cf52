from lispy.types import Environment, QExpr, Symbol, UnboundSymbol, is_equal


def test_lookup_walks_the_chain():
    root = Environment()
    child = Environment(root)
    root.define("x", 1.0)
    assert child.lookup(Symbol("x")) == 1.0
    assert "x" in child
    assert child.find("x") is root


def test_local_binding_shadows_parent():
    root = Environment()
    child = Environment(root)
    root.define("x", 1.0)
    child.define("x", 2.0)
    assert child.lookup("x") == 2.0
    assert root.lookup("x") == 1.0


def test_unbound_symbol_is_an_error_value():
    env = Environment()
    result = env.lookup(Symbol("nope"))
    assert isinstance(result, UnboundSymbol)
    assert result.message == "Unbound Symbol 'nope'"


def test_define_overwrites_in_place():
    env = Environment()
    env.define("a", 1.0)
    env.define("b", 2.0)
    env.define("a", 3.0)
    assert list(env.vars) == ["a", "b"]
    assert env.lookup("a") == 3.0


def test_define_and_lookup_copy_values():
    env = Environment()
    value = QExpr([1.0])
    env.define("xs", value)
    value.cells.append(2.0)
    assert is_equal(env.lookup("xs"), QExpr([1.0]))

    got = env.lookup("xs")
    got.cells.append(9.0)
    assert is_equal(env.lookup("xs"), QExpr([1.0]))


def test_define_global_targets_root():
    root = Environment()
    mid = Environment(root)
    leaf = Environment(mid)
    leaf.define_global("g", 7.0)
    assert "g" in root.vars
    assert "g" not in leaf.vars
    assert leaf.root() is root


def test_copy_keeps_parent_and_copies_bindings():
    root = Environment()
    env = Environment(root)
    env.define("xs", QExpr([1.0]))
    dup = env.copy()
    assert dup.outer is root
    dup.vars["xs"].cells.append(2.0)
    assert len(env.vars["xs"]) == 1


def test_with_outer_shares_bindings_but_not_parent():
    frame = Environment()
    caller = Environment()
    caller.define("y", 5.0)
    view = frame.with_outer(caller)
    assert frame.outer is None
    assert view.lookup("y") == 5.0
    view.define("z", 1.0)
    assert frame.lookup("z") == 1.0
    assert isinstance(frame.lookup("y"), UnboundSymbol)


def test_update_and_str():
    env = Environment(Environment())
    env.update({"a": 1.0})
    assert env.lookup("a") == 1.0
    assert str(env).endswith("-> ...")
    assert repr(env).startswith("<Environment chain:")
