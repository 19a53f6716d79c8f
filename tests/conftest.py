import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Create files under tmp_path from a {relpath: str|bytes} dict; trailing '/' makes a dir."""
    def _make(spec):
        for rel, content in spec.items():
            p = tmp_path / rel
            if rel.endswith("/"):
                p.mkdir(parents=True, exist_ok=True)
                continue
            p.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                p.write_bytes(content)
            else:
                p.write_text(content, encoding="utf-8")
        return tmp_path
    return _make
