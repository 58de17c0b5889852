import unittest

import numpy as np

from algorithms import InvalidParameter
from config import COLOR_LINE, COLOR_STEP_HIGHLIGHT, DEFAULT_PARAMS
from player import LoopScheduler
from states import PlaybackState
from surface import ArraySurface
from visualizer import AlgorithmVisualizer, DONE_READOUT


class TestAlgorithmVisualizer(unittest.TestCase):
    def setUp(self):
        self.surface = ArraySurface(40, 40)
        self.sched = LoopScheduler()
        self.vis = AlgorithmVisualizer(self.surface, self.sched)
        self.changes = 0

        def changed():
            self.changes += 1
        self.vis.on_change = changed

    def test_highlights_current_and_restores_previous(self):
        self.vis.start('bresenham', x0=0, y0=0, x1=3, y1=1)
        self.sched.run_until(0)
        self.assertEqual(self.surface.pixel(0, 0), COLOR_STEP_HIGHLIGHT)
        self.assertEqual(self.vis.readout, (0, 0, "Step 0: Pixel(0, 0), Error=2"))
        self.sched.run_until(50)
        self.assertEqual(self.surface.pixel(0, 0), COLOR_LINE)
        self.assertEqual(self.surface.pixel(1, 0), COLOR_STEP_HIGHLIGHT)
        self.assertEqual(self.vis.readout.x, 1)

    def test_completion_readout(self):
        self.vis.start('bresenham', x0=0, y0=0, x1=3, y1=1)
        self.sched.run_until(150)
        self.assertTrue(self.vis.animating)
        self.sched.run_until(200)
        self.assertEqual(self.vis.readout, DONE_READOUT)
        self.assertEqual(self.vis.state, PlaybackState.DONE)
        self.assertEqual(self.surface.pixel(3, 1), COLOR_LINE)
        self.assertEqual(self.changes, 1 + 4 + 1)  # clear, four steps, done

    def test_invalid_input_leaves_surface_untouched(self):
        self.vis.start('dda', x0=0, y0=0, x1=10, y1=10)
        self.sched.run_until(100)
        before = self.surface.array.copy()
        with self.assertRaises(InvalidParameter):
            self.vis.start('midpointCircle', cx=20, cy=20, r=0)
        self.assertTrue(np.array_equal(self.surface.array, before))
        self.assertEqual(self.vis.message, "Radius must be a positive number.")
        self.assertEqual(self.vis.algorithm, 'dda')
        self.assertEqual(self.vis.params['r'], DEFAULT_PARAMS['r'])

    def test_clear_cancels_playback(self):
        self.vis.start('midpointCircle', cx=20, cy=20, r=8)
        self.sched.run_until(100)
        self.vis.clear()
        self.assertEqual(self.surface.lit_pixels(), set())
        self.assertEqual(self.vis.readout.info, 'N/A')
        self.sched.run_until(10000)
        self.assertEqual(self.surface.lit_pixels(), set())
        self.assertEqual(self.vis.state, PlaybackState.CANCELLED)

    def test_pause_and_resume(self):
        self.vis.set_speed(10)
        self.vis.start('dda', x0=0, y0=0, x1=30, y1=0)
        self.sched.run_until(20)
        self.assertTrue(self.vis.pause())
        self.sched.run_until(1000)
        self.assertEqual(self.vis.readout.x, 2)
        self.assertTrue(self.vis.resume())
        self.sched.run_until(1010)
        self.assertEqual(self.vis.readout.x, 3)

    def test_restart_replaces_previous_run(self):
        self.vis.start('dda', x0=0, y0=0, x1=30, y1=0)
        self.sched.run_until(0)
        self.vis.start('dda', x0=0, y0=10, x1=5, y1=10)
        self.sched.run_until(10000)
        self.assertEqual(self.vis.readout, DONE_READOUT)
        self.assertFalse(any(y == 0 for _, y in self.surface.lit_pixels()))

    def test_set_algorithm_clears_and_validates(self):
        self.vis.start('dda', x0=0, y0=0, x1=5, y1=5)
        self.sched.run_until(0)
        self.vis.set_algorithm('bresenham')
        self.assertEqual(self.surface.lit_pixels(), set())
        with self.assertRaises(InvalidParameter):
            self.vis.set_algorithm('xiaolin')

    def test_reset_restores_defaults(self):
        self.vis.set_speed(300)
        self.vis.start('midpointCircle', cx=5, cy=5, r=3)
        self.vis.reset()
        self.assertEqual(self.vis.algorithm, 'dda')
        self.assertEqual(self.vis.params, DEFAULT_PARAMS)
        self.assertEqual(self.vis.speed, 50)


if __name__ == "__main__":
    unittest.main()
