from orbitui.context import Callback, ContextProvider, callback


def test_context_provider_basic():
    provider = ContextProvider()
    provider.provide(42)
    provider.provide("hello")

    assert provider.consume(int) == 42
    assert provider.consume(str) == "hello"
    assert provider.consume(float) is None

    assert provider.has(int)
    assert provider.has(str)
    assert not provider.has(float)


def test_context_provider_inheritance():
    parent = ContextProvider()
    parent.provide(42)

    child = ContextProvider.with_parent(parent)
    child.provide("child_value")

    assert child.consume(int) == 42
    assert child.consume(str) == "child_value"
    assert child.has(int)
    assert not parent.has(str)


def test_child_value_shadows_parent():
    parent = ContextProvider()
    parent.provide(1)
    child = ContextProvider.with_parent(parent)
    child.provide(2)
    assert child.consume(int) == 2
    assert parent.consume(int) == 1


def test_provide_replaces_value():
    provider = ContextProvider()
    provider.provide(1)
    provider.provide(2)
    assert provider.consume(int) == 2


def test_remove_is_local():
    parent = ContextProvider()
    parent.provide(42)
    child = ContextProvider.with_parent(parent)
    child.provide(7)

    assert child.remove(int) is True
    assert child.consume(int) == 42
    assert child.remove(int) is False
    assert parent.consume(int) == 42


def test_values_keyed_by_exact_type():
    provider = ContextProvider()
    provider.provide(True)
    assert provider.consume(bool) is True
    assert provider.consume(int) is None


def test_repr_reports_counts():
    provider = ContextProvider.with_parent(ContextProvider())
    provider.provide(1)
    assert repr(provider) == "ContextProvider(parent=True, values=[1 values])"


def test_callback_call():
    cb = Callback(lambda x: x * 2)
    assert cb.call(21) == 42
    assert cb(4) == 8


def test_callback_function_and_sharing():
    seen = []
    cb = callback(seen.append)
    copy = cb
    cb.call("a")
    copy.call("b")
    assert seen == ["a", "b"]
    assert cb == copy