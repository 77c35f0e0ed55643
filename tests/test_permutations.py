from dsakit.permutations import permutations


def test_basic():
    assert permutations([1, 2, 3]) == [
        [1, 2, 3],
        [1, 3, 2],
        [2, 1, 3],
        [2, 3, 1],
        [3, 2, 1],
        [3, 1, 2],
    ]


def test_input_is_not_modified():
    nums = [4, 5, 6]
    permutations(nums)
    assert nums == [4, 5, 6]


def test_empty_list_has_one_empty_permutation():
    assert permutations([]) == [[]]


def test_count_and_uniqueness():
    result = permutations([1, 2, 3, 4])
    assert len(result) == 24
    assert len({tuple(p) for p in result}) == 24
    assert all(sorted(p) == [1, 2, 3, 4] for p in result)