"""Shared fixtures: a few verses from GNT critical editions."""

import pytest

LUKE_12_16_17 = (
    "16 Εἶπεν δὲ παραβολὴν πρὸς αὐτοὺς λέγων·\n"
    "         ἀνθρώπου τινὸς πλουσίου εὐφόρησεν ἡ χώρα. 17 \n"
    "         καὶ διελογίζετο ἐν ἑαυτῷ λέγων· τί ποιήσω, ὅτι \n"
    "         οὐκ ἔχω ποῦ συνάξω τοὺς καρπούς μου; "
)

LUKE_12_16_17_CORE = (
    "ειπενδεπαραβοληνπροϲαυτουϲλεγωνανθρωπουτ"
    "ινοϲπλουϲιουευφορηϲενηχωρακαιδιελογιζετοενεαυτω"
    "λεγωντιποιηϲωοτιουκεχωπουϲυναξωτουϲκαρπουϲμου"
)

VERSES = [
    LUKE_12_16_17,
    "Ἐν ἀρχῇ ἦν ὁ λόγος, καὶ ὁ λόγος ἦν πρὸς τὸν θεόν, καὶ θεὸς ἦν ὁ λόγος.",
    "1 Ἀρχὴ τοῦ εὐαγγελίου |ιυ| |χυ| [υἱοῦ |θυ|].",
    "ΒΙΒΛΟΣ ΓΕΝΕΣΕΩΣ ΙΗΣΟΥ ΧΡΙΣΤΟΥ ΥΙΟΥ ΔΑΥΙΔ ΥΙΟΥ ΑΒΡΑΑΜ",
    "τί ποιήσω; ὅτι οὐκ ἔχω ποῦ συνάξω· (κς) “ἰδοὺ” ⟦ἐγώ⟧ ¶ …",
    "",
]


@pytest.fixture(params=VERSES, ids=lambda v: v[:12] or "empty")
def verse(request):
    return request.param


@pytest.fixture
def luke_passage():
    """Luke 12:16-17 as printed in a critical edition, with its core text."""
    return LUKE_12_16_17, LUKE_12_16_17_CORE
