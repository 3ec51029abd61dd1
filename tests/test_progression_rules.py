import unittest

from program_builder.models import Block, Day, DifficultyRating, ExerciseEntry
from program_builder.progression_rules import progress, progress_block


class ProgressionRulesTests(unittest.TestCase):
    def test_easy_progresses_load_and_rpe(self):
        entry = ExerciseEntry("Back Squat", sets=4, reps=6, rpe=7.0, load=100.0)
        result = progress(entry, DifficultyRating.EASY)
        self.assertEqual((result.sets, result.reps, result.rpe, result.load), (4, 6, 7.5, 105.0))

    def test_hard_reduces_load_and_rpe(self):
        entry = ExerciseEntry("Back Squat", sets=4, reps=6, rpe=7.0, load=100.0)
        result = progress(entry, DifficultyRating.HARD)
        self.assertEqual((result.sets, result.reps, result.rpe, result.load), (4, 6, 6.5, 95.0))

    def test_just_right_nudges_load_only(self):
        entry = ExerciseEntry("Back Squat", sets=4, reps=6, rpe=7.0, load=100.0)
        result = progress(entry, DifficultyRating.JUST_RIGHT)
        self.assertEqual((result.sets, result.reps, result.rpe, result.load), (4, 6, 7.0, 102.0))

    def test_load_arithmetic_rounds_to_one_decimal(self):
        for load in [0.0, 2.5, 47.5, 60.0, 100.0, 142.5, 200.3]:
            entry = ExerciseEntry("Press", sets=3, reps=8, load=load)
            self.assertEqual(progress(entry, "easy").load, round(load * 1.05, 1))
            self.assertEqual(progress(entry, "hard").load, round(load * 0.95, 1))
            self.assertEqual(progress(entry, "just-right").load, round(load * 1.02, 1))

    def test_easy_without_load_adds_rep_then_set(self):
        self.assertEqual(progress(ExerciseEntry("Row", sets=3, reps=10), "easy").reps, 11)

        at_rep_cap = progress(ExerciseEntry("Row", sets=4, reps=12), "easy")
        self.assertEqual((at_rep_cap.sets, at_rep_cap.reps), (5, 12))

        at_both_caps = progress(ExerciseEntry("Row", sets=6, reps=12), "easy")
        self.assertEqual((at_both_caps.sets, at_both_caps.reps), (6, 12))

    def test_hard_without_load_drops_a_set(self):
        result = progress(ExerciseEntry("Row", sets=4, reps=10), "hard")
        self.assertEqual((result.sets, result.reps), (3, 10))

        at_floor = progress(ExerciseEntry("Row", sets=2, reps=10), "hard")
        self.assertEqual((at_floor.sets, at_floor.reps), (2, 10))

    def test_defaults_written_into_result(self):
        entry = ExerciseEntry("Core circuit 3 rounds")
        self.assertEqual((progress(entry, "easy").sets, progress(entry, "easy").reps), (3, 7))
        self.assertEqual((progress(entry, "hard").sets, progress(entry, "hard").reps), (2, 6))
        self.assertEqual((progress(entry, "just-right").sets, progress(entry, "just-right").reps), (3, 6))
        self.assertIsNone(progress(entry, "easy").load)
        self.assertIsNone(progress(entry, "easy").rpe)

    def test_rpe_caps(self):
        self.assertEqual(progress(ExerciseEntry("Squat", rpe=9.0), "easy").rpe, 9.0)
        self.assertEqual(progress(ExerciseEntry("Squat", rpe=8.8), "easy").rpe, 9.0)
        self.assertEqual(progress(ExerciseEntry("Squat", rpe=6.0), "hard").rpe, 6.0)
        self.assertEqual(progress(ExerciseEntry("Squat", rpe=6.2), "hard").rpe, 6.0)

    def test_sets_and_reps_stay_in_bounds(self):
        for difficulty in DifficultyRating:
            for sets in range(2, 7):
                for reps in range(3, 13):
                    result = progress(ExerciseEntry("Lift", sets=sets, reps=reps), difficulty)
                    self.assertTrue(2 <= result.sets <= 6)
                    self.assertTrue(3 <= result.reps <= 12)

    def test_input_is_not_mutated_and_raw_text_kept(self):
        entry = ExerciseEntry("Squat", sets=3, reps=6, load=60.0, raw_text="Squat 3x6 60kg")
        result = progress(entry, "easy")
        self.assertEqual(entry.load, 60.0)
        self.assertEqual(result.load, 63.0)
        self.assertEqual(result.raw_text, "Squat 3x6 60kg")

    def test_short_difficulty_alias(self):
        entry = ExerciseEntry("Squat", sets=3, reps=6, rpe=7.0)
        self.assertEqual(progress(entry, "just"), progress(entry, DifficultyRating.JUST_RIGHT))

    def test_progress_block_keeps_order(self):
        block = Block(
            days=[
                Day("Day 1 – Lower", [ExerciseEntry("Squat", 3, 6), ExerciseEntry("Lunge", 3, 10)]),
                Day("Day 2 – Upper", [ExerciseEntry("Bench", 4, 6, load=60.0)]),
            ]
        )
        result = progress_block(block, "easy")
        self.assertEqual([day.title for day in result.days], ["Day 1 – Lower", "Day 2 – Upper"])
        self.assertEqual([item.reps for item in result.days[0].items], [7, 11])
        self.assertEqual(result.days[1].items[0].load, 63.0)
        self.assertEqual(block.days[0].items[0].reps, 6)


if __name__ == "__main__":
    unittest.main()
