import itertools
import unittest

from unscrambler.engine.matcher import blanks_needed, can_form


class CanFormTests(unittest.TestCase):
    def test_exact_letters(self) -> None:
        self.assertTrue(can_form("CAT", "TAC"))

    def test_case_insensitive(self) -> None:
        self.assertTrue(can_form("cat", "TaC"))
        self.assertTrue(can_form("CAT", "act"))

    def test_missing_letter_rejected(self) -> None:
        self.assertFalse(can_form("DOG", "CAT"))

    def test_repeated_letters_need_repeated_tiles(self) -> None:
        self.assertFalse(can_form("TEST", "TES"))
        self.assertFalse(can_form("TEST", "TESX"))
        self.assertTrue(can_form("TEST", "TTSE"))

    def test_wildcard_covers_missing_letter(self) -> None:
        self.assertTrue(can_form("CAT", "CA?"))
        self.assertTrue(can_form("ACT", "CA?"))
        self.assertFalse(can_form("DOG", "CA?"))

    def test_wildcards_form_shared_pool(self) -> None:
        # Two different letters short, covered by two blanks.
        self.assertTrue(can_form("DOG", "O??"))
        self.assertTrue(can_form("EEE", "E??"))
        self.assertFalse(can_form("EEEE", "E??"))

    def test_all_wildcards(self) -> None:
        self.assertTrue(can_form("ZZZ", "???"))
        self.assertFalse(can_form("ZZZ", "??"))

    def test_empty_rack(self) -> None:
        self.assertFalse(can_form("A", ""))

    def test_word_longer_than_rack(self) -> None:
        self.assertFalse(can_form("CATS", "CAT"))
        self.assertFalse(can_form("CATS", "???"))

    def test_blanks_needed_sums_deficits(self) -> None:
        self.assertEqual(blanks_needed("BALLOON", "BALON"), 2)
        self.assertEqual(blanks_needed("CAT", "CAT"), 0)
        self.assertEqual(blanks_needed("CAT", "??"), 3)

    def test_matches_deficit_definition(self) -> None:
        letters = "ABE?"
        words = ["".join(p) for n in range(1, 4) for p in itertools.product("ABC", repeat=n)]
        for rack_len in range(0, 5):
            for rack in itertools.combinations_with_replacement(letters, rack_len):
                rack_text = "".join(rack)
                blanks = rack_text.count("?")
                for word in words:
                    deficit = sum(
                        max(0, word.count(ch) - rack_text.count(ch)) for ch in set(word)
                    )
                    self.assertEqual(
                        can_form(word, rack_text),
                        deficit <= blanks,
                        msg=f"{word} / {rack_text}",
                    )

    def test_more_wildcards_never_hurt(self) -> None:
        words = ["CAT", "ACT", "DOG", "TEST", "ZEBRA", "AA"]
        for base in ["", "C", "CA", "TES", "ZEB"]:
            for word in words:
                previous = can_form(word, base)
                for extra in range(1, 4):
                    current = can_form(word, base + "?" * extra)
                    if previous:
                        self.assertTrue(current, msg=f"{word} / {base}+{extra}")
                    previous = current


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
