from densematrix.util import contains, unit_sequence


def test_unit_sequence_repeats_element():
    assert unit_sequence(2.5, 3) == [2.5, 2.5, 2.5]
    assert unit_sequence(1.0, 0) == []


def test_contains_finds_members_of_unsorted_input():
    values = [7, 1, 4]
    assert contains(values, 4)
    assert contains(values, 7)
    assert not contains(values, 5)
    assert not contains(values, 8)
    assert not contains([], 0)


def test_contains_leaves_caller_sequence_unsorted():
    values = [3, 2, 1]
    contains(values, 2)
    assert values == [3, 2, 1]


def test_contains_with_presorted_values():
    values = [1, 4, 7]
    assert contains(values, 4, presorted=True)
    assert not contains(values, 5, presorted=True)
    assert not contains([], 0, presorted=True)
