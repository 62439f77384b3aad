"Word-wraps text for terminals and folded protocol headers."

#
#  wrapping.py - library to implement word-wrap
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

import io

from . import common

LF = common.LF
CRLF = common.CRLF

################################################################

class options:
	"""How to wrap. |limit| is the longest a line may be, in
	characters. |prefix| starts every line after a soft break
	and counts towards that line's length. |linebreak| is written
	for each soft break (None means LF); line feeds in the input
	are always copied as they are. If |break_words| is set, a word
	which can't fit on a line by itself is cut where it overflows."""

	def __init__(self, limit, prefix='', linebreak=None, break_words=0):
		self.limit = limit
		self.prefix = prefix
		self.linebreak = linebreak
		self.break_words = break_words

	def soft_break_sequence(self):
		if self.linebreak is None:
			return LF
		return common.as_text(self.linebreak)

	def __repr__(self):
		return 'options(limit=%r, prefix=%r, linebreak=%r, break_words=%r)' % (
			self.limit, self.prefix, self.linebreak, self.break_words)

################################################################

class wrapper:
	"""Rewraps strings in one pass according to an |options|.

	Characters are gathered into a pending word and a pending run
	of space. The space is only written out when the word after it
	is, so whitespace either side of a break disappears."""

	def __init__(self, opts, logging=0):
		self.opts = opts
		self.logging = logging
		self.log = ''

	def note(self, message):
		if self.logging:
			self.log = self.log + '\n~ ' + message

	def soft_break(self, out, column):
		"""Writes a soft break and the prefix to |out|. Returns the
		length of the new line so far."""
		self.note('break at column %d' % (column,))
		out.write(self.opts.soft_break_sequence())
		out.write(self.opts.prefix)
		return len(self.opts.prefix)

	def __call__(self, text):
		limit = self.opts.limit
		prefix_length = len(self.opts.prefix)

		out = io.StringIO()
		current = 0
		word = []
		space = []

		for char in text:
			if char == '\n':
				if word:
					out.write(''.join(space))
					out.write(''.join(word))
					word = []
				# Whatever space was pending goes with the line.
				space = []
				out.write(char)
				self.note('hard break')
				current = 0

			elif common.is_breaking_space(char):
				if word:
					current += len(space) + len(word)
					out.write(''.join(space))
					out.write(''.join(word))
					space = []
					word = []
					if current >= limit:
						current = self.soft_break(out, current)

				# Nothing on the line yet, so it would be leading space.
				if current > 0:
					space.append(char)

			else:
				word.append(char)

				if current + len(word) + len(space) > limit:
					# Strictly greater: a line holding only the prefix
					# can't be helped by breaking it again.
					if current > prefix_length:
						current = self.soft_break(out, current)
						space = []
					elif self.opts.break_words:
						column = current + len(word)
						self.note('split word after %d characters' % (len(word),))
						out.write(''.join(word))
						word = []
						space = []
						current = self.soft_break(out, column)

		if word:
			out.write(''.join(space))
			out.write(''.join(word))

		return out.getvalue()

################################################################

def wrap(text, opts):
	"""Word-wraps |text|, a string, according to |opts|, an |options|.
	Returns the wrapped string."""
	return wrapper(opts)(text)

def wrap_string(text, prefix, limit, linebreak=None):
	"""Word-wraps |text| to |limit| characters, starting each new line
	with |prefix|. Words are never broken."""
	return wrap(text, options(limit, prefix, linebreak))
