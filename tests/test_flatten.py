from millpath.flatten import flatten


def test_flatten_keeps_order():
    assert flatten([[1, 2], [], [3]]) == [1, 2, 3]


def test_flatten_empty():
    assert flatten([]) == []
    assert flatten([[], []]) == []


def test_flatten_length_is_sum_of_lengths():
    nested = [["a"], ["b", "c"], ["d", "e", "f"]]
    result = flatten(nested)
    assert len(result) == sum(len(sub) for sub in nested)
    assert result[:1] == nested[0]
    assert result[-3:] == nested[2]