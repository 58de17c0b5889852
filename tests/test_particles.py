import random
import unittest

from particles import Particle, ParticleField, advance, spawn


class TestParticles(unittest.TestCase):
    def test_spawn_within_ranges(self):
        rng = random.Random(7)
        for _ in range(200):
            p = spawn((100, 50), rng)
            self.assertTrue(0 <= p.x < 100 and 0 <= p.y < 50)
            self.assertTrue(1 <= p.size < 6)
            self.assertTrue(-0.5 <= p.vx < 0.5 and -0.5 <= p.vy < 0.5)
            self.assertTrue(0.1 <= p.alpha < 0.4)
            self.assertIn(p.shape, ('circle', 'square'))

    def test_advance_returns_new_record(self):
        p = Particle(5.0, 5.0, 2.0, 0.5, -0.25, 0.2, 'circle')
        q = advance(p, (10, 10))
        self.assertEqual((q.x, q.y), (5.5, 4.75))
        self.assertEqual((p.x, p.y), (5.0, 5.0))

    def test_bounces_at_edge(self):
        p = Particle(9.8, 5.0, 2.0, 0.5, 0.0, 0.2, 'square')
        q = advance(p, (10, 10))
        self.assertEqual(q.vx, -0.5)
        self.assertAlmostEqual(q.x, 10.3)

    def test_respawns_when_far_outside(self):
        p = Particle(30.0, 5.0, 1.0, 0.5, 0.0, 0.2, 'circle')
        q = advance(p, (10, 10), random.Random(1))
        self.assertTrue(0 <= q.x < 10 and 0 <= q.y < 10)

    def test_field_update(self):
        field = ParticleField((200, 100), count=50, rng=random.Random(3))
        before = field.particles
        field.update()
        self.assertEqual(len(field.particles), 50)
        self.assertNotEqual(before, field.particles)
        self.assertEqual(field.particles[0].color[:3], (150, 150, 150))


if __name__ == "__main__":
    unittest.main()
