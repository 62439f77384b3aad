"Reflow: word-wrap for fixed-width text and folded protocol headers."

from .wrapping import LF, CRLF, options, wrapper, wrap, wrap_string
