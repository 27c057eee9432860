from datetime import datetime, timezone

import pytest

API_INTRO_HTML = """<html>
<body>
<h1>Last.fm Web Services</h1>
<h2>Getting Started</h2>
<div class="wspanel">
  <p>Not the method list</p>
</div>
<h2>API Methods</h2>
<div class="wspanel methods">
  <ul>
    <li class="package">
      <h3>Track</h3>
      <ul>
        <li><a href="/api/show/track.scrobble">track.scrobble</a></li>
        <li><a href="/api/show/track.love">track.love</a></li>
      </ul>
    </li>
    <li class="package">
      <h3>Album</h3>
      <ul>
        <li><a href="/api/show/album.getInfo">album.getInfo</a></li>
        <li><a href="/api/show/album.search">album.search</a></li>
        <li><a href="/api/show/album.search">album.search</a></li>
      </ul>
    </li>
  </ul>
</div>
</body>
</html>
"""


@pytest.fixture
def api_intro_html():
    return API_INTRO_HTML


@pytest.fixture
def catalog():
    return {
        "Track": ("track.scrobble", "track.love"),
        "Album": ("album.getInfo", "album.search"),
    }


@pytest.fixture
def fixed_now():
    # a Monday
    return datetime(2026, 10, 19, 14, 5, tzinfo=timezone.utc)
