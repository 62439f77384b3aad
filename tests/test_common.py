"Tests for character classification."

import pytest

from Reflow import common

@pytest.mark.parametrize('char', [' ', '\t', '\n', '\r', '\x0b', '\x0c',
	'\x85', '\u2003', '\u3000'])
def test_breaking_space(char):
	assert common.is_breaking_space(char)

@pytest.mark.parametrize('char', ['a', '\xa0', '\x1c', '\x1f', '-', '\u2584'])
def test_not_breaking_space(char):
	assert not common.is_breaking_space(char)

def test_as_text():
	assert common.as_text(b'\r\n') == '\r\n'
	assert common.as_text('\n') == '\n'
	assert common.as_text(b'\xa7') == '\xa7'
