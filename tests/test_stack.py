from dsakit.stack import Stack


def test_push_adds_item():
    stack = Stack()
    stack.push(42)
    assert len(stack) == 1
    assert stack.pop() == 42


def test_pop_removes_and_returns_last_item():
    stack = Stack()
    stack.push(42).push(84)
    assert stack.pop() == 84
    assert len(stack) == 1
    assert stack.pop() == 42


def test_pop_returns_none_when_empty():
    assert Stack().pop() is None


def test_push_returns_stack():
    stack = Stack()
    assert stack.push(1) is stack