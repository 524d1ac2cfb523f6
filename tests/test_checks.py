# -*- coding: utf-8 -*-

from textbook_rsa.utils import discover_checks, assert_eq, summarize_str

import pytest


@pytest.fixture(autouse=True)
def small_keys(monkeypatch):
    monkeypatch.delenv('TEXTBOOK_RSA_BIGTEST', raising=False)

@pytest.mark.parametrize('ch', discover_checks(), ids=lambda c: c.__name__)
def test_self_check(ch):
    ch()

def test_discover_checks_sorted():
    names = [i.__name__ for i in discover_checks()]
    assert names == sorted(names)
    assert 'textbook_vector' in names
    assert 'not_invertible' in names

def test_assert_eq():
    assert_eq(1, 1)
    with pytest.raises(AssertionError, match='hint'):
        assert_eq(1, 2, 'hint')

def test_summarize_str():
    assert summarize_str('short') == 'short'
    assert (summarize_str(b'0123456789abcdefghijXYZ') ==
            '0123456789...defghijXYZ')
