import unittest

from prometheus_client import CollectorRegistry

from core.mirror_metrics import (
    LAST_UPDATED_METRIC,
    RESPONSE_STATUS_METRIC,
    MirrorMetrics,
)


class TestMirrorMetrics(unittest.TestCase):
    def setUp(self):
        self.registry = CollectorRegistry()
        self.metrics = MirrorMetrics(self.registry)

    def test_no_series_before_first_sample(self):
        self.assertEqual(self.metrics.series_count(LAST_UPDATED_METRIC), 0)
        self.assertEqual(self.metrics.series_count(RESPONSE_STATUS_METRIC), 0)
        self.assertIsNone(self.metrics.last_updated("backend1"))

    def test_set_freshness(self):
        self.metrics.set_freshness("backend1", 1136214245.0)
        self.assertEqual(self.metrics.last_updated("backend1"), 1136214245.0)
        self.assertEqual(
            self.registry.get_sample_value(LAST_UPDATED_METRIC, {"backend": "backend1"}),
            1136214245.0,
        )

    def test_set_availability_stores_float(self):
        self.metrics.set_availability("backend1", 503)
        value = self.metrics.response_status("backend1")
        self.assertIsInstance(value, float)
        self.assertEqual(value, 503.0)

    def test_overwrite_is_idempotent(self):
        self.metrics.set_freshness("backend1", 10.0)
        self.metrics.set_freshness("backend1", 10.0)
        self.assertEqual(self.metrics.last_updated("backend1"), 10.0)
        self.assertEqual(self.metrics.series_count(LAST_UPDATED_METRIC), 1)

    def test_one_series_per_backend(self):
        self.metrics.set_availability("backend1", 200)
        self.metrics.set_availability("backend2", 500)
        self.assertEqual(self.metrics.series_count(RESPONSE_STATUS_METRIC), 2)
        self.assertEqual(self.metrics.series_count(LAST_UPDATED_METRIC), 0)

    def test_separate_registries_do_not_collide(self):
        other = MirrorMetrics(CollectorRegistry())
        other.set_freshness("backend1", 1.0)
        self.assertIsNone(self.metrics.last_updated("backend1"))

    def test_duplicate_registration_on_same_registry_fails(self):
        with self.assertRaises(ValueError):
            MirrorMetrics(self.registry)


if __name__ == "__main__":
    unittest.main()
