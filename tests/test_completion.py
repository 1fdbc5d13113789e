from rlabs.completion import CompletionSet


def test_toggle_adds_then_removes():
    completion = CompletionSet()
    assert completion.toggle(4) is True
    assert completion.contains(4)
    assert completion.toggle(4) is False
    assert not completion.contains(4)


def test_double_toggle_leaves_set_unchanged():
    completion = CompletionSet()
    completion.toggle(1)
    completion.toggle(7)
    before = completion.completed()

    for item_id in (1, 2, 7):
        completion.toggle(item_id)
        completion.toggle(item_id)
        assert completion.completed() == before


def test_toggles_commute():
    first = CompletionSet()
    first.toggle(2)
    first.toggle(5)

    second = CompletionSet()
    second.toggle(5)
    second.toggle(2)

    assert first.completed() == second.completed() == frozenset({2, 5})


def test_container_protocol():
    completion = CompletionSet()
    for item_id in (3, 0, 9):
        completion.toggle(item_id)

    assert 0 in completion
    assert 1 not in completion
    assert len(completion) == 3
    assert list(completion) == [0, 3, 9]
