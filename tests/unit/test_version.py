import re

from pysatl_dist import __version__


def test_version_pep440() -> None:
    assert re.match(
        r"^\d+!\d+(\.\d+)*([abc]|rc)?\d*(\.post\d+)?(\.dev\d+)?$|^\d+(\.\d+)*([abc]|rc)?\d*(\.post\d+)?(\.dev\d+)?$",
        __version__,
    )


def test_version_matches_distribution_metadata() -> None:
    from importlib.metadata import version

    assert __version__ == version("pysatl-dist")
