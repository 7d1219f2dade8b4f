"""MARC relator codes accepted for creators and contributors.

See https://www.loc.gov/marc/relators/relaterm.html for the full list.
"""

RELATOR_SCHEME = "marc:relators"

AUTHOR = "aut"
ARTIST = "art"

RELATORS: dict[str, str] = {
    "abr": "Abridger",
    "acp": "Art copyist",
    "act": "Actor",
    "adi": "Art director",
    "adp": "Adapter",
    "aft": "Author of afterword, colophon, etc.",
    "anl": "Analyst",
    "anm": "Animator",
    "ann": "Annotator",
    "ant": "Bibliographic antecedent",
    "app": "Applicant",
    "aqt": "Author in quotations or text abstracts",
    "arc": "Architect",
    "ard": "Artistic director",
    "arr": "Arranger",
    "art": "Artist",
    "asg": "Assignee",
    "asn": "Associated name",
    "att": "Attributed name",
    "auc": "Auctioneer",
    "aud": "Author of dialog",
    "aui": "Author of introduction, etc.",
    "aus": "Screenwriter",
    "aut": "Author",
    "bdd": "Binding designer",
    "bjd": "Bookjacket designer",
    "bkd": "Book designer",
    "bkp": "Book producer",
    "blw": "Blurb writer",
    "bnd": "Binder",
    "bpd": "Bookplate designer",
    "bsl": "Bookseller",
    "cll": "Calligrapher",
    "clr": "Colorist",
    "cmm": "Commentator",
    "cmp": "Composer",
    "cmt": "Compositor",
    "cnd": "Conductor",
    "com": "Compiler",
    "cov": "Cover designer",
    "cpc": "Copyright claimant",
    "cph": "Copyright holder",
    "cre": "Creator",
    "ctb": "Contributor",
    "ctg": "Cartographer",
    "cur": "Curator",
    "cwt": "Commentator for written text",
    "dnr": "Donor",
    "dsr": "Designer",
    "dte": "Dedicatee",
    "dto": "Dedicator",
    "dub": "Dubious author",
    "edc": "Editor of compilation",
    "edt": "Editor",
    "egr": "Engraver",
    "etr": "Etcher",
    "fmo": "Former owner",
    "fnd": "Funder",
    "fpy": "First party",
    "hnr": "Honoree",
    "ill": "Illustrator",
    "ilu": "Illuminator",
    "ins": "Inscriber",
    "inv": "Inventor",
    "isb": "Issuing body",
    "itr": "Instrumentalist",
    "ive": "Interviewee",
    "ivr": "Interviewer",
    "lbt": "Librettist",
    "ltg": "Lithographer",
    "lyr": "Lyricist",
    "mfr": "Manufacturer",
    "mrk": "Markup editor",
    "mus": "Musician",
    "nrt": "Narrator",
    "oth": "Other",
    "own": "Owner",
    "pbd": "Publishing director",
    "pbl": "Publisher",
    "pht": "Photographer",
    "ppm": "Papermaker",
    "prf": "Performer",
    "prg": "Programmer",
    "prt": "Printer",
    "pro": "Producer",
    "red": "Redaktor",
    "rev": "Reviewer",
    "rth": "Research team head",
    "rtm": "Research team member",
    "sce": "Scenarist",
    "scl": "Sculptor",
    "scr": "Scribe",
    "sng": "Singer",
    "spk": "Speaker",
    "stl": "Storyteller",
    "tcd": "Technical director",
    "trc": "Transcriber",
    "trl": "Translator",
    "tyd": "Type designer",
    "tyg": "Typographer",
    "wam": "Writer of accompanying material",
    "wdc": "Woodcutter",
    "wde": "Wood engraver",
    "win": "Writer of introduction",
    "wit": "Witness",
    "wpr": "Writer of preface",
    "wst": "Writer of supplementary textual content",
}


def is_relator(code: str) -> bool:
    """Check if ``code`` is a known relator code."""
    return code in RELATORS
