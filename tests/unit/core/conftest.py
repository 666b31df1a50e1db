"""Shared fixtures for core unit tests"""

import pytest

from mdtree.core.parse import parse


SAMPLE_MD = """\
---
title: Sample Doc
slug: sample-doc
author: "Jane Roe"
---

# Sample **Doc**

A paragraph with *italic*, **strong**, `code` and a [link](https://example.com).

> Quoted *text*
> on two lines

- first
- second

1. one
2. two

![Diagram](img/diagram.png)(The diagram)

```python
print("**hi**")
```

---

Closing paragraph.
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_doc")
def sample_doc_fixture():
    return parse(SAMPLE_MD)
