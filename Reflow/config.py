"Configuration mechanisms for Reflow."

#  reflow - named wrapping profiles
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

import configparser

from . import common
from . import wrapping

###########################################################

class ReflowException (Exception):
	"Something is wrong with how we were asked to wrap."

	def __init__(self, name=''):
		self.name = name

	def __str__(self):
		return self.name

class ReflowConfigException(ReflowException):
	"A profile is missing, or says something we can't use."
	pass

###########################################################

# Site-wide profiles. Anything in here is read over the top
# of the built-in profiles below when load() is called.
baseconf = '/etc/reflow.conf'

builtin_profiles = r'''
[plain-profile]
limit = 80

[terminal-profile]
limit = 79

# RFC 5322 folding: continuation lines start with a tab.
[header-profile]
limit = 76
prefix = "\t"
linebreak = crlf

# Signature headers carry long base64 runs which have to be cut.
[signature-profile]
limit = 76
prefix = "        "
linebreak = crlf
break-words = yes
'''

linebreaks = {
	'lf': common.LF,
	'crlf': common.CRLF,
	}

settings = configparser.ConfigParser(interpolation=None)
settings.read_string(builtin_profiles)

def load(filenames=baseconf):
	"""Reads the configuration file(s) |filenames| over the current
	settings. Files which don't exist are skipped. Returns the names
	of the files which were read."""
	return settings.read(filenames)

def value(section, option):
	"""Returns a value from the configuration, or None if it isn't there."""
	try:
		return settings.get(section, option)
	except (configparser.NoSectionError, configparser.NoOptionError):
		return None

def unquote(text):
	"""INI values lose their surrounding whitespace, so a prefix made of
	whitespace has to be quoted. Inside double quotes, \\t means a tab
	and \\\\ a backslash."""

	if len(text) < 2 or text[0] != '"' or text[-1] != '"':
		return text

	result = ''
	escaped = 0
	for char in text[1:-1]:
		if escaped:
			if char == 't':
				result = result + '\t'
			else:
				result = result + char
			escaped = 0
		elif char == '\\':
			escaped = 1
		else:
			result = result + char
	if escaped:
		result = result + '\\'
	return result

def profile_details(name):
	"""Returns a dictionary describing the profile |name|, which is the
	name of a paragraph "<name>-profile" in the configuration."""

	section = name + '-profile'

	if not settings.has_section(section):
		raise ReflowConfigException(name + ' is not a known profile')

	limit = value(section, 'limit')
	if limit is None:
		raise ReflowConfigException(name + ' has no limit')
	try:
		limit = int(limit)
	except ValueError:
		raise ReflowConfigException(
			name + ': limit should be a number, not ' + limit)
	if limit <= 0:
		raise ReflowConfigException(
			name + ': limit should be more than zero')

	prefix = value(section, 'prefix')
	if prefix is None:
		prefix = ''

	linebreak = value(section, 'linebreak')
	if linebreak is None:
		linebreak = 'lf'
	if linebreak.lower() not in linebreaks:
		raise ReflowConfigException(
			name + ': unknown linebreak ' + linebreak)

	try:
		break_words = settings.getboolean(section, 'break-words', fallback=False)
	except ValueError:
		raise ReflowConfigException(
			name + ': break-words should be yes or no, not ' +
			value(section, 'break-words'))

	return {
		'limit': limit,
		'prefix': unquote(prefix),
		'linebreak': linebreaks[linebreak.lower()],
		'break_words': break_words,
		}

def profile(name):
	"Returns wrapping options for the profile |name|."
	details = profile_details(name)
	return wrapping.options(
		details['limit'],
		details['prefix'],
		details['linebreak'],
		details['break_words'])

def all_known_profiles():
	"Returns a dictionary mapping name to details for all known profiles."
	result = {}

	for candidate in settings.sections():
		if candidate.endswith('-profile'):
			name = candidate[:-8]
			result[name] = profile_details(name)

	return result

def wrap(text, name='plain'):
	"Word-wraps |text| using the profile |name|."
	return wrapping.wrap(text, profile(name))
