import io

import pytest

import check_spelling
from spellbloom.errors import InvalidParameterError
from spellbloom.lookup import NO_CORRECTION_MARKER


@pytest.fixture
def files(tmp_path):
    dictionary = tmp_path / "dictionary.txt"
    dictionary.write_text("the book she said\nwatch cat\n", encoding="utf-8")
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("the the the book cat watch she said hello\n", encoding="utf-8")
    text = tmp_path / "input.txt"
    text.write_text('"She said hte book.\nwatch qqqqqqqq\n', encoding="utf-8")
    return dictionary, corpus, text


@pytest.mark.parametrize("backend", ["exact", "bloom"])
def test_reports_suggestions(files, backend):
    dictionary, corpus, text = files
    out = io.StringIO()

    unresolved = check_spelling.main(
        [str(text), "--dictionary", str(dictionary), "--corpus", str(corpus),
         "--backend", backend, "--false-positive", "0.001"],
        out=out,
    )

    output = out.getvalue()
    assert unresolved == 2
    assert '"She said hte book.' in output
    assert "Suggestions for hte are:  the" in output
    assert NO_CORRECTION_MARKER in output
    assert output.index("hte are") < output.index(NO_CORRECTION_MARKER)


def test_missing_sources_degrade(tmp_path):
    text = tmp_path / "input.txt"
    text.write_text("anything goes\n", encoding="utf-8")
    out = io.StringIO()

    unresolved = check_spelling.main(
        [str(text), "--dictionary", str(tmp_path / "none.txt"), "--corpus", str(tmp_path / "none2.txt")],
        out=out,
    )

    assert unresolved == 2
    assert out.getvalue().count(NO_CORRECTION_MARKER) == 2


def test_invalid_probability_fails_at_startup(files):
    dictionary, corpus, text = files
    with pytest.raises(InvalidParameterError):
        check_spelling.main(
            [str(text), "--dictionary", str(dictionary), "--corpus", str(corpus), "--false-positive", "1.5"],
            out=io.StringIO(),
        )
