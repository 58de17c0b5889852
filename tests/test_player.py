import unittest

from algorithms import InvalidParameter
from pacing import clamp_speed, raster_tick_delay, random_tick_delay
from player import LoopScheduler, StepPlayer, Ticker
from states import PlaybackState


class Recorder:
    def __init__(self):
        self.steps = []
        self.done = 0

    def on_step(self, step, index):
        self.steps.append((step, index))

    def on_done(self):
        self.done += 1


class TestLoopScheduler(unittest.TestCase):
    def test_fires_in_due_order(self):
        sched = LoopScheduler()
        fired = []
        sched.call_later(20, lambda: fired.append('b'))
        sched.call_later(10, lambda: fired.append('a'))
        sched.call_later(20, lambda: fired.append('c'))
        self.assertEqual(sched.run_until(15), 1)
        self.assertEqual(sched.run_until(20), 2)
        self.assertEqual(fired, ['a', 'b', 'c'])

    def test_cancelled_timer_is_skipped(self):
        sched = LoopScheduler()
        fired = []
        t = sched.call_later(5, lambda: fired.append(1))
        t.cancel()
        sched.run_until(100)
        self.assertEqual(fired, [])
        self.assertEqual(sched.pending(), 0)

    def test_limit_leaves_rest_queued(self):
        sched = LoopScheduler()
        for i in range(5):
            sched.call_later(i, lambda: None)
        self.assertEqual(sched.run_until(10, limit=3), 3)
        self.assertEqual(sched.pending(), 2)

    def test_negative_delay_rejected(self):
        with self.assertRaises(ValueError):
            LoopScheduler().call_later(-1, lambda: None)


class TestStepPlayer(unittest.TestCase):
    def setUp(self):
        self.sched = LoopScheduler()
        self.player = StepPlayer(self.sched)
        self.rec = Recorder()

    def start(self, seq='abc', interval=10):
        return self.player.start(seq, interval, self.rec.on_step, self.rec.on_done)

    def test_plays_in_order_then_done(self):
        self.start()
        self.assertEqual(self.player.state, PlaybackState.RUNNING)
        self.sched.run_until(0)
        self.assertEqual(self.rec.steps, [('a', 0)])
        self.assertEqual(self.player.current_step, 'a')
        self.sched.run_until(20)
        self.assertEqual(self.rec.steps, [('a', 0), ('b', 1), ('c', 2)])
        self.assertEqual(self.rec.done, 0)
        self.sched.run_until(30)
        self.assertEqual(self.rec.done, 1)
        self.assertEqual(self.player.state, PlaybackState.DONE)
        self.sched.run_until(1000)
        self.assertEqual(self.rec.done, 1)

    def test_cancel_stops_all_callbacks(self):
        handle = self.start()
        self.sched.run_until(10)
        self.assertEqual(len(self.rec.steps), 2)
        self.assertTrue(handle.cancel())
        self.sched.run_until(10000)
        self.assertEqual(len(self.rec.steps), 2)
        self.assertEqual(self.rec.done, 0)
        self.assertEqual(self.player.state, PlaybackState.CANCELLED)

    def test_cancel_from_inside_step(self):
        count = []

        def on_step(step, index):
            count.append(index)
            if index == 1:
                self.player.cancel()

        self.player.start(range(10), 10, on_step, self.rec.on_done)
        self.sched.run_until(1000)
        self.assertEqual(count, [0, 1])
        self.assertEqual(self.rec.done, 0)

    def test_restart_cancels_previous_run(self):
        first = self.start('abc')
        self.sched.run_until(0)
        self.start('xy')
        self.sched.run_until(1000)
        self.assertEqual(first.state, PlaybackState.CANCELLED)
        self.assertEqual([s for s, _ in self.rec.steps], ['a', 'x', 'y'])
        self.assertEqual(self.rec.done, 1)

    def test_pause_freezes_index_and_resume_continues(self):
        self.start()
        self.sched.run_until(0)
        self.assertTrue(self.player.pause())
        self.assertEqual(self.player.state, PlaybackState.PAUSED)
        self.sched.run_until(500)
        self.assertEqual(self.player.index, 1)
        self.assertTrue(self.player.resume())
        self.sched.run_until(509)
        self.assertEqual(len(self.rec.steps), 1)
        self.sched.run_until(510)
        self.assertEqual([s for s, _ in self.rec.steps], ['a', 'b'])

    def test_pause_inside_step_does_not_double_tick(self):
        def on_step(step, index):
            self.rec.on_step(step, index)
            if index == 0:
                self.player.pause()

        self.player.start('abc', 10, on_step, self.rec.on_done)
        self.sched.run_until(100)
        self.assertEqual(len(self.rec.steps), 1)
        self.player.resume()
        self.sched.run_until(1000)
        self.assertEqual([i for _, i in self.rec.steps], [0, 1, 2])
        self.assertEqual(self.rec.done, 1)

    def test_empty_sequence_finishes_immediately(self):
        self.start('')
        self.sched.run_until(0)
        self.assertEqual(self.rec.done, 1)
        self.assertIsNone(self.player.current_step)

    def test_interval_clamped(self):
        self.player.set_interval(1)
        self.assertEqual(self.player.interval, 10)
        self.player.set_interval(10000)
        self.assertEqual(self.player.interval, 500)
        with self.assertRaises(InvalidParameter):
            self.player.set_interval(0)

    def test_interval_change_applies_to_next_tick(self):
        self.start('abcd', 100)
        self.sched.run_until(0)
        self.player.set_interval(10)
        self.sched.run_until(100)
        self.assertEqual(len(self.rec.steps), 2)
        self.sched.run_until(110)
        self.assertEqual(len(self.rec.steps), 3)

    def test_idle_before_start(self):
        self.assertEqual(self.player.state, PlaybackState.IDLE)
        self.assertFalse(self.player.pause())
        self.assertFalse(self.player.cancel())


class TestTicker(unittest.TestCase):
    def test_repeats_until_cancelled(self):
        sched = LoopScheduler()
        ticker = Ticker(sched)
        ticks = []
        delay = [10]
        ticker.start(lambda: ticks.append(sched.now), lambda: delay[0])
        sched.run_until(20)
        self.assertEqual(ticks, [0, 10, 20])
        delay[0] = 50
        sched.run_until(100)
        self.assertEqual(ticks, [0, 10, 20, 30, 80])
        ticker.cancel()
        self.assertFalse(ticker.running)
        sched.run_until(1000)
        self.assertEqual(len(ticks), 5)

    def test_start_again_replaces_run(self):
        sched = LoopScheduler()
        ticker = Ticker(sched)
        a, b = [], []
        old = ticker.start(lambda: a.append(1), lambda: 10)
        sched.run_until(0)
        ticker.start(lambda: b.append(1), lambda: 10)
        sched.run_until(30)
        self.assertEqual(len(a), 1)
        self.assertEqual(len(b), 4)
        self.assertEqual(old.state, PlaybackState.CANCELLED)


class TestPacing(unittest.TestCase):
    def test_clamp(self):
        self.assertEqual(clamp_speed(5), 10)
        self.assertEqual(clamp_speed(50), 50)
        self.assertEqual(clamp_speed(900), 500)
        for bad in (0, -5, float('nan'), 'fast', None):
            with self.assertRaises(InvalidParameter):
                clamp_speed(bad)

    def test_raster_delay_scales_with_area(self):
        self.assertAlmostEqual(raster_tick_delay(50, 500, 400), 0.025)
        self.assertAlmostEqual(raster_tick_delay(50, 10, 10) * 100, raster_tick_delay(50, 100, 100) * 10000)
        with self.assertRaises(InvalidParameter):
            raster_tick_delay(50, 0, 10)

    def test_random_delay_ignores_area(self):
        self.assertEqual(random_tick_delay(50), 100)
        self.assertEqual(random_tick_delay(1000), 1000)


if __name__ == "__main__":
    unittest.main()
