"""Case classification cascade tests"""

from globalwatch.normalization.classifier import (
    CaseSignals,
    classify,
    derive_case_fields,
    filter_charges,
    subject_keywords,
    title_keywords,
    vicap_disambiguation,
)
from globalwatch.schemas.normalized import Classification as C


class TestCriminalCategories:
    """Wanted, cyber and crimes-against-children records"""

    def test_plain_charges_default_to_wanted(self):
        signals = CaseSignals(title="ROBERT EXAMPLE", subjects=("Bank Robbery", "Armed and Dangerous"))
        assert classify(signals) is C.WANTED_CRIMINAL

    def test_cyber_subject(self):
        signals = CaseSignals(title="IVAN EXAMPLE", subjects=("Cyber's Most Wanted",))
        assert classify(signals) is C.CYBER_MOST_WANTED

    def test_cyber_beats_children(self):
        signals = CaseSignals(subjects=("Crimes Against Children", "Cyber's Most Wanted"))
        assert classify(signals) is C.CYBER_MOST_WANTED

    def test_children_subjects(self):
        assert classify(CaseSignals(subjects=("Crimes Against Children",))) is C.CRIMES_AGAINST_CHILDREN
        assert classify(CaseSignals(subjects=("ECAP",))) is C.CRIMES_AGAINST_CHILDREN

    def test_captured_status_wins_outright(self):
        signals = CaseSignals(status="captured", subjects=("Cyber's Most Wanted",), title="Missing person")
        assert classify(signals) is C.CAPTURED

    def test_suspect_poster_with_death_language_stays_wanted(self):
        """A murder suspect's poster describing the victim is not a victim record"""
        signals = CaseSignals(
            title="JOHN SMITH",
            subjects=("Murder",),
            description="Smith is wanted for murder. The victim's body was found in 2015.",
        )
        assert classify(signals) is C.WANTED_CRIMINAL

    def test_contact_boilerplate_does_not_override_charges(self):
        signals = CaseSignals(
            title="JOHN SMITH",
            subjects=("Murder",),
            remarks="Anyone with information should contact the nearest FBI office.",
        )
        assert classify(signals) is C.WANTED_CRIMINAL


class TestCaseCategories:
    """Missing, unidentified, victim and seeking-information records"""

    def test_unidentified_subject(self):
        signals = CaseSignals(title="JANE DOE", subjects=("ViCAP Unidentified Persons",))
        assert classify(signals) is C.UNIDENTIFIED_PERSON

    def test_missing_subject(self):
        signals = CaseSignals(title="SARAH EXAMPLE", subjects=("Kidnappings and Missing Persons",))
        assert classify(signals) is C.MISSING_PERSON

    def test_seeking_information_subject(self):
        signals = CaseSignals(title="UNKNOWN EVENT", subjects=("Seeking Information - Terrorism",))
        assert classify(signals) is C.SEEKING_INFORMATION

    def test_poster_codes(self):
        assert classify(CaseSignals(title="A B", poster_classification="missing")) is C.MISSING_PERSON
        assert classify(CaseSignals(title="A B", poster_classification="information")) is C.SEEKING_INFORMATION
        assert classify(CaseSignals(title="A B", person_classification="Victim")) is C.VICTIM_OF_CRIME

    def test_victim_code_with_identity_marker_is_unidentified(self):
        signals = CaseSignals(title="JANE DOE", person_classification="Victim")
        assert classify(signals) is C.UNIDENTIFIED_PERSON

    def test_vicap_homicide_subject_is_victim(self):
        signals = CaseSignals(title="TINA EXAMPLE", subjects=("ViCAP Homicides and Sexual Assaults",))
        assert classify(signals) is C.VICTIM_OF_CRIME

    def test_vicap_homicide_subject_with_doe_title_is_unidentified(self):
        signals = CaseSignals(title="JANE DOE - PORTLAND", subjects=("ViCAP Homicides and Sexual Assaults",))
        assert classify(signals) is C.UNIDENTIFIED_PERSON

    def test_missing_title(self):
        assert classify(CaseSignals(title="Missing Person: Sarah Example", subjects=("Kansas City",))) is C.MISSING_PERSON


class TestFreeText:
    """Phrases in description, details and remarks"""

    def test_body_found_is_victim(self):
        signals = CaseSignals(title="TINA EXAMPLE", description="Her body was found near the river.")
        assert classify(signals) is C.VICTIM_OF_CRIME

    def test_body_found_with_unidentified_text(self):
        signals = CaseSignals(
            title="CASE 2014",
            description="Skeletal remains of an unidentified female were located in a wooded area.",
        )
        assert classify(signals) is C.UNIDENTIFIED_PERSON

    def test_remains_found_is_unidentified(self):
        signals = CaseSignals(title="CASE 1998", remarks="Skeletal remains were located by hikers.")
        assert classify(signals) is C.UNIDENTIFIED_PERSON

    def test_last_seen_and_disappearance_is_missing(self):
        signals = CaseSignals(
            title="SARAH EXAMPLE",
            details="She was last seen leaving work and has been missing since 2019.",
        )
        assert classify(signals) is C.MISSING_PERSON

    def test_cause_of_death_request_is_seeking_information(self):
        signals = CaseSignals(
            title="TINA EXAMPLE",
            description="The FBI is seeking information on the cause of death of Tina Example.",
        )
        assert classify(signals) is C.SEEKING_INFORMATION

    def test_contact_boilerplate_without_charges(self):
        signals = CaseSignals(title="JOHN ROE", remarks="Anyone with information should call the tip line.")
        assert classify(signals) is C.SEEKING_INFORMATION


class TestDegenerateRecords:
    """Records whose subject tags carry no signal"""

    def test_date_only_subject_falls_back_to_description(self):
        signals = CaseSignals(title="MARY EXAMPLE", subjects=("2019",), description="Missing from Denver, Colorado")
        assert classify(signals) is C.MISSING_PERSON

    def test_empty_record_is_unspecified(self):
        assert classify(CaseSignals()) is C.UNSPECIFIED

    def test_title_without_keywords_is_wanted(self):
        assert classify(CaseSignals(title="ALEX EXAMPLE")) is C.WANTED_CRIMINAL


class TestCascadeFold:
    """The fold itself, with injected rules"""

    def test_no_rules_means_wanted(self):
        assert classify(CaseSignals(title="X"), rules=()) is C.WANTED_CRIMINAL

    def test_later_rule_refines_unspecified(self):
        rules = (lambda s: C.UNSPECIFIED, lambda s: C.MISSING_PERSON)
        assert classify(CaseSignals(), rules=rules) is C.MISSING_PERSON

    def test_specific_answer_is_never_replaced(self):
        rules = (lambda s: C.MISSING_PERSON, lambda s: C.CYBER_MOST_WANTED)
        assert classify(CaseSignals(), rules=rules) is C.MISSING_PERSON

    def test_rule_returning_none_is_skipped(self):
        rules = (lambda s: None, lambda s: C.SEEKING_INFORMATION)
        assert classify(CaseSignals(), rules=rules) is C.SEEKING_INFORMATION


class TestCaseFields:
    """Display description and charges"""

    def test_filter_charges_drops_dates_locations_and_label(self):
        charges = filter_charges(
            ["Bank Robbery", "New York", "Newark Division", "2019-05-01", "Wanted", "Bank Robbery"],
            C.WANTED_CRIMINAL,
        )
        assert charges == ["Bank Robbery"]

    def test_filter_charges_matches_field_office_slugs(self):
        assert filter_charges(["Kansas City", "Fraud"], C.WANTED_CRIMINAL, ["kansascity"]) == ["Fraud"]

    def test_filter_charges_all_removed(self):
        assert filter_charges(["Cyber's Most Wanted"], C.CYBER_MOST_WANTED) is None

    def test_criminal_description_joins_charges(self):
        signals = CaseSignals(subjects=("Bank Robbery", "Armed and Dangerous"))
        description, charges = derive_case_fields(C.WANTED_CRIMINAL, signals, signals.subjects)
        assert description == "Bank Robbery / Armed and Dangerous"
        assert charges == ["Bank Robbery", "Armed and Dangerous"]

    def test_criminal_without_charges_uses_default(self):
        description, charges = derive_case_fields(C.CYBER_MOST_WANTED, CaseSignals(), ["Cyber's Most Wanted"])
        assert description == "Wanted for cyber crimes"
        assert charges is None

    def test_missing_default_uses_publication_date(self):
        description, charges = derive_case_fields(C.MISSING_PERSON, CaseSignals(), publication="2024-03-01T10:00:00")
        assert description == "Missing since 2024-03-01"
        assert charges is None

    def test_missing_default_without_date(self):
        description, _ = derive_case_fields(C.MISSING_PERSON, CaseSignals())
        assert description == "Missing since unknown date"

    def test_case_record_never_has_charges(self):
        signals = CaseSignals(remarks="Found in 1990", subjects=("Homicide",))
        description, charges = derive_case_fields(C.UNIDENTIFIED_PERSON, signals, signals.subjects)
        assert description == "Found in 1990"
        assert charges is None


class TestInvariants:
    """Properties that hold for every record"""

    def test_unidentified_title_without_subjects(self):
        signals = CaseSignals(title="Jane Doe - Unidentified Remains Found in County Park")
        assert classify(signals) is C.UNIDENTIFIED_PERSON
        _, charges = derive_case_fields(C.UNIDENTIFIED_PERSON, signals)
        assert charges is None

    def test_missing_teenager_title(self):
        assert classify(CaseSignals(title="Missing: Teenager Last Seen Near River")) is C.MISSING_PERSON

    def test_identity_markers_never_yield_victim(self):
        for signals in [
            CaseSignals(title="John Doe", subjects=("Victim Identification",)),
            CaseSignals(title="CASE", person_classification="Victim", description="An unidentified male"),
            CaseSignals(title="CASE", description="Jane Doe's body was found in 2001."),
        ]:
            assert classify(signals) is not C.VICTIM_OF_CRIME

    def test_unidentified_free_text_with_charge_tag(self):
        signals = CaseSignals(
            title="CASE 1234",
            subjects=("Homicide",),
            description="Unidentified female found deceased in a ditch.",
        )
        assert classify(signals) is C.UNIDENTIFIED_PERSON

    def test_doe_in_remarks_with_charge_tag(self):
        signals = CaseSignals(title="CASE 77", subjects=("Violent Crime",), remarks="Believed to be a John Doe.")
        assert classify(signals) is C.UNIDENTIFIED_PERSON

    def test_classification_is_deterministic(self):
        signals = CaseSignals(title="TINA EXAMPLE", subjects=("ViCAP Homicides and Sexual Assaults",))
        assert classify(signals) is classify(signals)


class TestViCAP:
    """ViCAP tags that the subject and title keyword stages leave undecided"""

    def test_vicap_with_unidentified(self):
        assert classify(CaseSignals(title="CASE 7", subjects=("ViCAP Unidentified",))) is C.UNIDENTIFIED_PERSON

    def test_vicap_with_seeking_information(self):
        signals = CaseSignals(title="CASE 7", subjects=("ViCAP", "Seeking", "Information"))
        assert subject_keywords(signals) is None
        assert title_keywords(signals) is None
        assert vicap_disambiguation(signals) is C.SEEKING_INFORMATION
        assert classify(signals) is C.SEEKING_INFORMATION

    def test_vicap_without_keywords_stays_wanted(self):
        signals = CaseSignals(title="CASE 7", subjects=("ViCAP Alert",))
        assert vicap_disambiguation(signals) is None
        assert classify(signals) is C.WANTED_CRIMINAL
