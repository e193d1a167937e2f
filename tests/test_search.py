import unittest

from tilepuzzle.domains.puzzlen import NPuzzle
from tilepuzzle.errors import InvalidConfiguration, InvalidInput
from tilepuzzle.experiments.cases import CASES
from tilepuzzle.search.best_first import PuzzleSearch, best_first
from tilepuzzle.search.state import Mode, PuzzleState

CLASSIC = (1, 2, 3, 4, 8, 0, 7, 6, 5)
P8_GOAL = (1, 2, 3, 4, 5, 6, 7, 8, 0)


def board_with_blank_at(n, pos):
    tiles = list(range(1, n * n))
    tiles.insert(pos, 0)
    return tuple(tiles)


class RecordingSearch(PuzzleSearch):
    def __init__(self, puzzle):
        super().__init__(puzzle)
        self.expanded_boards = []

    def successors(self, state):
        self.expanded_boards.append(state.board)
        return super().successors(state)


class MoveGenerationTestCase(unittest.TestCase):
    def test_legal_move_count_by_blank_position(self):
        engine = PuzzleSearch(NPuzzle(3))
        expected = {0: 2, 2: 2, 6: 2, 8: 2, 1: 3, 3: 3, 5: 3, 7: 3, 4: 4}
        for pos, count in expected.items():
            state = PuzzleState(board_with_blank_at(3, pos))
            self.assertEqual(len(engine.successors(state)), count, pos)

    def test_legal_move_count_on_4x4(self):
        engine = PuzzleSearch(NPuzzle(4))
        corners, interior = {0, 3, 12, 15}, {5, 6, 9, 10}
        for pos in range(16):
            want = 2 if pos in corners else 4 if pos in interior else 3
            state = PuzzleState(board_with_blank_at(4, pos))
            self.assertEqual(len(engine.successors(state)), want, pos)

    def test_successor_order_left_right_up_down(self):
        engine = PuzzleSearch(NPuzzle(3))
        state = PuzzleState((1, 2, 3, 4, 0, 5, 6, 7, 8))
        blanks = [engine.find_blank(s.board) for s in engine.successors(state)]
        self.assertEqual(blanks, [3, 5, 1, 7])

    def test_illegal_moves_return_none(self):
        engine = PuzzleSearch(NPuzzle(3))
        top_left = PuzzleState(board_with_blank_at(3, 0))
        self.assertIsNone(engine.go_up(0, top_left))
        self.assertIsNone(engine.go_left(0, top_left))
        bottom_right = PuzzleState(P8_GOAL)
        self.assertIsNone(engine.go_down(8, bottom_right))
        self.assertIsNone(engine.go_right(8, bottom_right))

    def test_move_swaps_blank(self):
        engine = PuzzleSearch(NPuzzle(3))
        state = PuzzleState(CLASSIC)
        self.assertEqual(engine.go_down(5, state).board, (1, 2, 3, 4, 8, 5, 7, 6, 0))
        self.assertEqual(engine.go_up(5, state).board, (1, 2, 0, 4, 8, 3, 7, 6, 5))
        self.assertEqual(engine.go_left(5, state).board, (1, 2, 3, 4, 0, 8, 7, 6, 5))

    def test_successors_cost_one_more_and_leave_parent_untouched(self):
        engine = PuzzleSearch(NPuzzle(3))
        parent = PuzzleState(CLASSIC, Mode.MANHATTAN, g=3)
        children = engine.successors(parent)
        self.assertEqual(parent.board, CLASSIC)
        self.assertEqual(len({c.board for c in children}), len(children))
        for c in children:
            self.assertEqual(c.g, parent.g + 1)
            self.assertIs(c.parent, parent)
            self.assertEqual(c.history[-2], CLASSIC)


class SolveScenarioTestCase(unittest.TestCase):
    def assertValidPath(self, path, n):
        puzzle = NPuzzle(n)
        for a, b in zip(path, path[1:]):
            za, zb = puzzle.find_blank(a), puzzle.find_blank(b)
            ra, ca = divmod(za, n)
            rb, cb = divmod(zb, n)
            self.assertEqual(abs(ra - rb) + abs(ca - cb), 1)
            self.assertEqual(a[zb], b[za])
            self.assertEqual(sum(x != y for x, y in zip(a, b)), 2)

    def test_classic_board_every_mode(self):
        for mode in Mode:
            res = best_first(CLASSIC, mode)
            self.assertTrue(res.solved)
            self.assertEqual(res.termination, "ok")
            self.assertEqual(res.depth, 5)
            self.assertEqual(res.state.g, res.depth)
            self.assertGreater(res.expanded, 0)
            self.assertGreaterEqual(res.peak_frontier, 1)
            self.assertEqual(res.path[0], CLASSIC)
            self.assertEqual(res.path[-1], P8_GOAL)
            self.assertValidPath(res.path, 3)

    def test_already_solved(self):
        for mode in Mode:
            res = best_first(P8_GOAL, mode)
            self.assertEqual(res.depth, 0)
            self.assertEqual(res.expanded, 0)
            self.assertEqual(res.peak_frontier, 1)
            self.assertEqual(res.visited, 1)
            self.assertEqual(res.path, [P8_GOAL])

    def test_unsolvable_2x2_exhausts(self):
        res = best_first((2, 1, 3, 0), Mode.UNIFORM_COST)
        self.assertFalse(res.solved)
        self.assertEqual(res.termination, "exhausted")
        self.assertIsNone(res.depth)
        self.assertIsNone(res.path)
        # 4!/2 reachable boards, two moves from every blank position
        self.assertEqual(res.visited, 12)
        self.assertEqual(res.expanded, 24)

    def test_unsolvable_8_puzzle_exhausts(self):
        res = best_first((2, 1, 3, 4, 5, 6, 7, 8, 0), Mode.MANHATTAN)
        self.assertFalse(res.solved)
        self.assertEqual(res.visited, 181440)

    def test_cross_mode_depths_agree(self):
        for board in (CLASSIC, (0, 1, 3, 4, 2, 5, 7, 8, 6), (1, 2, 3, 4, 5, 6, 0, 7, 8), CASES["p8_mixed"]):
            depths = {best_first(board, mode).depth for mode in Mode}
            self.assertEqual(len(depths), 1, board)
        self.assertEqual(best_first((0, 1, 3, 4, 2, 5, 7, 8, 6), Mode.MANHATTAN).depth, 4)
        self.assertEqual(best_first((1, 2, 3, 4, 5, 6, 0, 7, 8), Mode.UNIFORM_COST).depth, 2)

    def test_informed_modes_expand_less(self):
        ucs, mth, mdh = (best_first(CLASSIC, mode).expanded for mode in Mode)
        self.assertGreaterEqual(ucs, mth)
        self.assertGreaterEqual(mth, mdh)

    def test_larger_boards(self):
        self.assertEqual(best_first(CASES["p15_one_move"], Mode.UNIFORM_COST).depth, 1)
        self.assertEqual(best_first(CASES["p24_column"], Mode.MANHATTAN).depth, 8)


class SearchBookkeepingTestCase(unittest.TestCase):
    def test_equal_priority_states_pop_in_insertion_order(self):
        engine = RecordingSearch(NPuzzle(3))
        res = engine.solve(PuzzleState(CLASSIC, Mode.UNIFORM_COST))
        self.assertTrue(res.solved)
        # CLASSIC has its blank on the right edge: Left, Up, Down are pushed, all at g=1
        self.assertEqual(engine.expanded_boards[:4], [
            CLASSIC,
            (1, 2, 3, 4, 0, 8, 7, 6, 5),
            (1, 2, 0, 4, 8, 3, 7, 6, 5),
            (1, 2, 3, 4, 8, 5, 7, 6, 0),
        ])

    def test_exact_statistics(self):
        expected = {
            Mode.UNIFORM_COST: (158, 70, 59),
            Mode.MISPLACED_TILE: (24, 14, 9),
            Mode.MANHATTAN: (15, 11, 6),
        }
        for mode, stats in expected.items():
            res = best_first(CLASSIC, mode)
            self.assertEqual((res.expanded, res.peak_frontier, res.visited), stats, mode)
        res = best_first((2, 1, 3, 0), Mode.UNIFORM_COST)
        self.assertEqual((res.expanded, res.peak_frontier, res.visited), (24, 5, 12))

    def test_no_board_expanded_twice(self):
        for mode in Mode:
            engine = RecordingSearch(NPuzzle(3))
            res = engine.solve(PuzzleState(CASES["p8_mixed"], mode))
            self.assertTrue(res.solved)
            self.assertEqual(len(engine.expanded_boards), len(set(engine.expanded_boards)))
            self.assertEqual(len(engine.visited), res.visited)

    def test_counters_reset_between_solves(self):
        engine = PuzzleSearch(NPuzzle(3))
        first = engine.solve(PuzzleState(CLASSIC, Mode.MISPLACED_TILE))
        second = engine.solve(PuzzleState(CLASSIC, Mode.MISPLACED_TILE))
        self.assertEqual(first.expanded, second.expanded)
        self.assertEqual(first.peak_frontier, second.peak_frontier)
        self.assertEqual(first.visited, second.visited)
        self.assertEqual(first.path, second.path)

    def test_engine_fields(self):
        engine = PuzzleSearch(NPuzzle.from_tile_count(15))
        self.assertEqual(engine.board_size, 15)
        self.assertEqual(engine.row_length, 4)
        self.assertTrue(engine.goal(NPuzzle(4).GOAL))

    def test_result_row(self):
        row = best_first(CLASSIC, "manhattan").as_row()
        self.assertEqual(row["mode"], "manhattan")
        self.assertEqual(row["depth"], 5)
        self.assertEqual(row["termination"], "ok")


class SolveValidationTestCase(unittest.TestCase):
    def test_bad_board_rejected_before_search(self):
        with self.assertRaises(InvalidInput):
            best_first((1, 2, 3, 4, 5, 6, 7, 8, 8))
        with self.assertRaises(InvalidInput):
            PuzzleSearch(NPuzzle(3)).solve(PuzzleState((1, 2, 3, 4, 5, 6, 7, 8, 9)))

    def test_board_length_mismatch(self):
        with self.assertRaises(InvalidInput):
            PuzzleSearch(NPuzzle(3)).solve(PuzzleState((1, 2, 3, 0)))

    def test_non_square_board_rejected(self):
        with self.assertRaises(InvalidConfiguration):
            best_first((1, 2, 3, 4, 5, 0))

    def test_unknown_mode_rejected(self):
        with self.assertRaises(InvalidConfiguration):
            best_first(CLASSIC, 5)


if __name__ == "__main__":
    unittest.main()
