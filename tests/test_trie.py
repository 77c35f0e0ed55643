from dsakit.trie import Trie


def test_source_scenario():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("apple") is True
    assert trie.search("app") is False
    assert trie.starts_with("app") is True
    assert trie.starts_with("big") is False

    trie.insert("app")
    assert trie.search("app") is True

    trie.delete("apple")
    assert trie.search("app") is True


def test_delete_removes_word_but_keeps_prefix_word():
    trie = Trie()
    trie.insert("apple")
    trie.insert("app")
    trie.delete("apple")
    assert trie.search("apple") is False
    assert trie.starts_with("appl") is False
    assert trie.starts_with("app") is True


def test_delete_only_word_clears_branch():
    trie = Trie()
    trie.insert("cat")
    trie.delete("cat")
    assert trie.search("cat") is False
    assert trie.starts_with("c") is False


def test_delete_missing_word_leaves_others():
    trie = Trie()
    trie.insert("dog")
    trie.delete("zebra")
    assert trie.search("dog") is True


def test_empty_prefix_always_matches():
    assert Trie().starts_with("") is True


def test_stored_value_is_word():
    trie = Trie()
    trie.insert("hi")
    assert trie.search("hi") is True
    assert trie.search("h") is False
    assert trie.search("his") is False