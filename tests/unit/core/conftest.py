"""Shared fixtures for core unit tests"""

import pytest

from mdpreview.core.markdown import Markdown


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("hello")
```

---

> A quote

See [docs](https://example.com "Docs").
"""


@pytest.fixture(name="md")
def md_fixture():
    return Markdown()


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(md):
    return md.tokenize(SAMPLE_MD)
