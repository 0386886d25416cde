"""Shared fixtures for core unit tests"""

import pytest

from mdnotes.core.events import make_parser


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

- item one
- [x] item two

| a | b |
|---|---|
| 1 | 2 |

```python
print("hello")
```
"""

FOOTNOTE_MD = """\
Alpha[^a] and beta[^b].

[^b]: Beta note.

[^a]: Alpha note.
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser()


@pytest.fixture(name="env")
def env_fixture():
    return {}


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="footnote_md")
def footnote_md_fixture():
    return FOOTNOTE_MD
