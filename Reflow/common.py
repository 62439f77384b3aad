"Character classification shared by the parts of reflow."

#  common.py - routines shared by many parts of reflow
#
# Copyright (c) 2002 Thomas Thurman
# thomas@thurman.org.uk
# 
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
# 
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# 
# You should have be able to view the GNU General Public License at 
# http://www.gnu.org/copyleft/gpl.html ; if not, write to the Free Software
# Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA 02111-1307, USA.

###########################################################

LF = '\n'
CRLF = '\r\n'

NBSP = '\xa0'

# Everything with the Unicode White_Space property. str.isspace()
# would also let in the information separators \x1c-\x1f.
whitespace = frozenset(
	'\t\n\x0b\x0c\r \x85\xa0\u1680'
	'\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a'
	'\u2028\u2029\u202f\u205f\u3000')

def is_breaking_space(char):
	"""Returns true if a line may be broken at |char|. The
	non-breaking space is whitespace, but never a break."""
	return char in whitespace and char != NBSP

################################################################

def as_text(sequence):
	"""Returns |sequence| as a string. Line breaks used to be
	given as bytes, so those are decoded one character per byte."""

	if isinstance(sequence, bytes):
		return sequence.decode('iso-8859-1')
	return sequence
