"""Shared fixtures for how-install tests."""

import pytest

from howinstall.core.extractor import InstallCommandIndex, InstallEntry


SAMPLE_PAGE = """
<html>
<body>
<div class="container">
  <div class="card row-item command-install install-debian" data-os="Debian GNU/Linux">
    <dl>
      <dt><i class="fab fa-debian"></i> Debian</dt>
      <dd><code>apt-get install curl</code></dd>
    </dl>
  </div>
  <div class="card row-item command-install install-ubuntu" data-os="Ubuntu">
    <dl>
      <dt><i class="fab fa-ubuntu"></i> Ubuntu</dt>
      <dd><code>apt-get install curl</code></dd>
    </dl>
  </div>
  <div class="card row-item command-install install-arch" data-os="Arch Linux">
    <dl>
      <dt><i class="fab fa-linux"></i> Arch Linux</dt>
      <dd><code>pacman -S curl</code></dd>
    </dl>
  </div>
  <div class="card row-item command-install install-kali d-none" data-os="Kali GNU/Linux">
    <dl>
      <dt><i class="fab fa-linux"></i> Kali Linux</dt>
      <dd><code>apt-get install curl</code></dd>
    </dl>
  </div>
  <div class="card row-item command-install" data-os="Windows">
    <dl>
      <dt><i class="fab fa-windows"></i> Windows</dt>
      <dd><code>choco install curl</code></dd>
    </dl>
  </div>
  <div class="card row-item command-install install-docker">
    <dl>
      <dt><i class="fab fa-docker"></i> Docker</dt>
      <dd><code>docker run cmd.cat/curl curl</code></dd>
    </dl>
  </div>
</div>
</body>
</html>
"""


def make_block(
    name: str,
    command: str,
    platform_id: str = None,
    data_os: str = None,
    hidden: bool = False,
) -> str:
    """Render one install block the way the lookup site does."""
    classes = ["command-install"]
    if platform_id is not None:
        classes.append(f"install-{platform_id}")
    if hidden:
        classes.append("d-none")
    attrs = f' data-os="{data_os}"' if data_os is not None else ""
    return (
        f'<div class="{" ".join(classes)}"{attrs}>'
        f"<dl><dt><i></i> {name}</dt><dd><code>{command}</code></dd></dl>"
        "</div>"
    )


def make_index(mapping: dict, command: str = "foo") -> InstallCommandIndex:
    """Index with exactly the given alias -> command pairs."""
    entries = [
        InstallEntry(display_name=alias, os_attribute="", platform_id="", command=cmd)
        for alias, cmd in mapping.items()
    ]
    return InstallCommandIndex(command, entries)


@pytest.fixture
def sample_page():
    """Lookup page for curl."""
    return SAMPLE_PAGE
