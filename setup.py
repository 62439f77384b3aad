"General setup script for reflow 1.0.0."

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

from setuptools import setup

setup(
    name         = 'reflow',
    description  = 'Single-pass word-wrap for terminals and folded headers',
    version      = '1.0.0',
    author       = 'Thomas Thurman',
    author_email = 'marnanel@marnanel.org',
    license      = 'GPL-2.0-or-later',
    platforms    = ['any'],
    keywords     = 'wrap wordwrap reflow text header folding',
    packages     = ['Reflow'],
    python_requires = '>=3.6',
    extras_require = {'test': ['pytest']},
    long_description = """Reflow rewraps free text so that no line is longer
than a given number of characters, breaking only at whitespace unless told
to cut long words. Continuation lines can carry a prefix, and soft breaks
can be CRLF for protocols which fold header lines.""",
    )
