from pathlib import Path

import pytest

PSPEC = """<?xml version="1.0" ?>
<PISI>
    <Source>
        <Name>{name}</Name>
        <Homepage>https://www.nano-editor.org</Homepage>
        <Packager>
            <Name>Jane Doe</Name>
            <Email>jane@example.com</Email>
        </Packager>
    </Source>
    <Package>
        <Name>{name}</Name>
    </Package>
    <History>
{updates}
    </History>
</PISI>
"""

UPDATE = """        <Update release="{release}">
            <Date>2016-09-12</Date>
            <Version>{version}</Version>
            <Comment>Packaging update</Comment>
            <Name>Jane Doe</Name>
            <Email>jane@example.com</Email>
        </Update>"""


def make_pspec(name: str = "nano", updates=((3, "2.4"),)) -> str:
    return PSPEC.format(
        name=name,
        updates="\n".join(UPDATE.format(release=r, version=v) for r, v in updates),
    )


@pytest.fixture
def write_pspec(tmp_path):
    def _write(
        content: str | None = None, filename: str = "pspec_x86_64.xml", **kw
    ) -> Path:
        tgt = tmp_path / filename
        tgt.write_text(make_pspec(**kw) if content is None else content)
        return tgt

    return _write


@pytest.fixture
def nano_pspec(write_pspec) -> Path:
    return write_pspec()
