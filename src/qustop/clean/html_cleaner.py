"""
Markup stripping module.

Removes HTML/XML tags from text and decodes character entities before
stop-word filtering. Tags are replaced by a space so that words on either
side of a tag never merge. Text between tags is kept, including the
bodies of script and style elements, unless dropping them is requested.
"""

import warnings
from typing import List
from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.element import PreformattedString

# Short plain-text inputs such as "index.html" are content here, not paths
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)


class MarkupStripper:
    """
    HTML cleaner for removing tags and decoding entities.

    Comments, doctypes and other declarations are markup and never reach
    the output. Script and style bodies are text like any other unless
    ``drop_script_content`` is enabled.
    """

    NON_TEXT_TAGS = ('script', 'style', 'template', 'noscript')

    def __init__(self, drop_script_content: bool = False):
        """
        Initialize MarkupStripper.

        Args:
            drop_script_content: Whether to remove the text inside script/style tags
        """
        self.drop_script_content = drop_script_content

    def strip(self, content: str) -> str:
        """
        Remove markup from content and decode entities.

        Args:
            content: Raw text possibly containing markup

        Returns:
            Text with tags replaced by spaces and entities decoded
        """
        if not content:
            return ""

        soup = BeautifulSoup(content, 'html.parser')

        if self.drop_script_content:
            for tag in soup(list(self.NON_TEXT_TAGS)):
                tag.decompose()

        # get_text() skips script and style strings, so collect them directly.
        # The parser already decodes entities in text nodes.
        strings = [
            string for string in soup.find_all(string=True)
            if not isinstance(string, PreformattedString)
        ]
        return ' '.join(strings)

    def batch_strip(self, contents: List[str]) -> List[str]:
        """Strip markup from multiple contents."""
        return [self.strip(content) for content in contents]


_default_stripper = MarkupStripper()


def strip_markup(content: str) -> str:
    """
    Convenience function to strip markup with default settings.

    Args:
        content: Text possibly containing markup

    Returns:
        Text with tags removed and entities decoded
    """
    return _default_stripper.strip(content)
