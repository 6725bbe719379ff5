"""
Unit tests for Markdown scanning helpers
"""
from blogstore import markdown

BODY = """# Title

Intro text.

```php
<?php echo "hi";
```

## Second ##

~~~
# not a heading
~~~

```
plain
```
"""


class TestCodeBlocks:
    """Fenced code block extraction"""

    def test_languages_and_code(self):
        """Language hint comes from the info string"""
        blocks = markdown.code_blocks(BODY)

        assert blocks == [
            ("php", '<?php echo "hi";'),
            (None, "# not a heading"),
            (None, "plain"),
        ]

    def test_shorter_fence_does_not_close(self):
        """A closing fence must be at least as long as the opener"""
        text = "````md\n```\ninner\n```\n````\n"

        assert markdown.code_blocks(text) == [("md", "```\ninner\n```")]

    def test_unclosed_fence(self):
        """Text ending inside a block is detected"""
        assert markdown.has_unclosed_fence("```js\nconsole.log(1)\n")
        assert not markdown.has_unclosed_fence(BODY)
        assert not markdown.has_unclosed_fence("")


class TestHeadings:
    """ATX heading extraction"""

    def test_headings_skip_code(self):
        """Hash lines inside fences are not headings"""
        assert markdown.headings(BODY) == [(1, "Title"), (2, "Second")]

    def test_hashtag_is_not_heading(self):
        """A hash without a following space is plain text"""
        assert markdown.headings("#hashtag\n### C#\n") == [(3, "C#")]
