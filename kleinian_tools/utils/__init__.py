"""Provide utility functions used by the various modules in this
package.

"""

from . import cp1, words
