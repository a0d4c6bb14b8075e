import pytest

from soupview import SoupConfig, parse

PAGE = """<!DOCTYPE html>
<!-- generated page -->
<html>
<head><title>Test page</title></head>
<body>
<div id="main" class="content wide">
  <p class="intro">Hello <b>world</b></p>
  <p class="intro lead">Second</p>
  <!-- note -->
  <span>tail</span>
</div>
<div class="content">
  <a href="/one">one</a>
  <a href="/two" class="ext">two</a>
</div>
</body>
</html>
"""


@pytest.fixture
def page_html():
    return PAGE


@pytest.fixture
def root():
    return parse(PAGE).unwrap()


@pytest.fixture
def debug_root():
    return parse(PAGE, SoupConfig(debug=True)).unwrap()
