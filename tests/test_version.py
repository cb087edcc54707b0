from falconsniff.version import Version


def test_unknown_revision_gives_na():
    assert Version().git_version() == "N/A"


def test_tag_preferred_over_revision():
    v = Version(revision="abc1234", dirty="", tag="v2.1", branch="main")
    assert v.git_version() == "v2.1 on branch main"


def test_revision_used_without_tag_and_dirty_marker():
    v = Version(revision="abc1234", dirty="+", tag="", branch="dev")
    assert v.git_version() == "abc1234+ on branch dev"


def test_na_revision_ignores_other_fields():
    v = Version(revision="N/A", dirty="+", tag="v1", branch="main")
    assert v.git_version() == "N/A"