"""Unit tests for duplicate word detection behavior."""

from agivocab.core import LiteralSource, PartOfSpeech, Vocabulary, WordGroup
from agivocab.resolution import collect_existing_literals, find_duplicate_words


def _noun(word_number: int, word: str, *targets: str) -> WordGroup:
    return WordGroup(
        word_number=word_number,
        canonical_word=word,
        target_synonyms=targets,
        part_of_speech=PartOfSpeech.NOUN,
    )


def _word(word_number: int, word: str, *sources: str) -> WordGroup:
    return WordGroup(word_number=word_number, canonical_word=word, source_synonyms=sources)


class TestCollectExistingLiterals:
    """Test the baseline literal set."""

    def test_includes_every_owned_literal_lowercased(self) -> None:
        group = WordGroup(
            word_number=1,
            canonical_word="Look",
            source_synonyms=("Examine",),
            target_synonyms=("הסתכל",),
        )
        vocabulary = Vocabulary(groups=(group,))
        assert collect_existing_literals(vocabulary) == {"look", "examine", "הסתכל"}

    def test_excludes_prefix_variants(self) -> None:
        vocabulary = Vocabulary(groups=(_noun(12, "house", "בית"),))
        assert "הבית" not in collect_existing_literals(vocabulary)


class TestFindDuplicateWords:
    """Test find_duplicate_words behavior."""

    def test_clean_vocabulary_has_no_duplicates(self) -> None:
        vocabulary = Vocabulary(groups=(_noun(12, "house", "בית"), _word(3, "look", "examine")))
        assert find_duplicate_words(vocabulary) == []

    def test_case_insensitive_canonical_collision_is_reported(self) -> None:
        """Two groups' canonical words equal case-insensitively are a duplicate."""
        vocabulary = Vocabulary(groups=(_word(1, "Look"), _word(2, "look")))
        duplicates = find_duplicate_words(vocabulary)
        assert [(d.word, d.word_numbers) for d in duplicates] == [("look", [1, 2])]

    def test_report_lists_every_registration_with_provenance(self) -> None:
        vocabulary = Vocabulary(groups=(_word(1, "get", "take"), _word(2, "take")))
        duplicates = find_duplicate_words(vocabulary)
        occurrences = [(o.word_number, o.source) for o in duplicates[0].occurrences]
        assert occurrences == [
            (1, LiteralSource.SOURCE_SYNONYM),
            (2, LiteralSource.CANONICAL_WORD),
        ]

    def test_same_literal_same_word_number_is_not_a_duplicate(self) -> None:
        """Synonyms repeated within one word number are harmless."""
        vocabulary = Vocabulary(groups=(_word(1, "get", "get"), _word(1, "take", "get")))
        assert find_duplicate_words(vocabulary) == []

    def test_all_duplicates_reported_in_one_pass(self) -> None:
        vocabulary = Vocabulary(
            groups=(_word(1, "look"), _word(2, "look"), _word(3, "get"), _word(4, "get"))
        )
        assert [d.word for d in find_duplicate_words(vocabulary)] == ["look", "get"]

    def test_variant_already_owned_elsewhere_is_not_a_duplicate(self) -> None:
        """A variant that exists as another word's literal is skipped, not reported."""
        vocabulary = Vocabulary(groups=(_noun(12, "בית", "בית"), _word(7, "הבית")))
        assert find_duplicate_words(vocabulary) == []

    def test_shared_target_synonym_reports_synonym_and_its_variants(self) -> None:
        """Two nouns sharing a translation collide on the word and all its variants."""
        vocabulary = Vocabulary(groups=(_noun(1, "house", "בית"), _noun(2, "home", "בית")))
        duplicates = find_duplicate_words(vocabulary)
        assert [d.word for d in duplicates] == ["בית", "בבית", "הבית", "לבית"]

    def test_generated_collisions_are_labelled_as_prefix_variants(self) -> None:
        vocabulary = Vocabulary(groups=(_noun(1, "house", "בית"), _noun(2, "home", "בית")))
        variant_report = find_duplicate_words(vocabulary)[1]
        assert {o.source for o in variant_report.occurrences} == {LiteralSource.PREFIX_VARIANT}

    def test_filler_group_is_not_expanded(self) -> None:
        """Word 0 never generates variants, so it cannot collide through them."""
        vocabulary = Vocabulary(groups=(_noun(0, "the", "בית"), _noun(5, "בבית")))
        assert find_duplicate_words(vocabulary) == []

    def test_input_is_not_modified(self) -> None:
        vocabulary = Vocabulary(groups=(_noun(1, "house", "בית"), _noun(2, "home", "בית")))
        before = vocabulary.model_dump()
        find_duplicate_words(vocabulary)
        assert vocabulary.model_dump() == before
