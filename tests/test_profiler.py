import unittest

from core.profiler import Profiler


class TestProfiler(unittest.IsolatedAsyncioTestCase):
    async def test_profiles_async_function(self):
        @Profiler.profile
        async def work(x):
            return x * 2

        with self.assertLogs("core.profiler", level="DEBUG") as logs:
            self.assertEqual(await work(3), 6)
        self.assertIn("work took", logs.output[0])

    def test_profiles_sync_function_that_raises(self):
        @Profiler.profile
        def fail():
            raise RuntimeError("boom")

        with self.assertLogs("core.profiler", level="DEBUG") as logs:
            with self.assertRaises(RuntimeError):
                fail()
        self.assertEqual(len(logs.records), 1)

    def test_keeps_function_metadata(self):
        @Profiler.profile
        def named():
            """doc"""

        self.assertEqual(named.__name__, "named")
        self.assertEqual(named.__doc__, "doc")


if __name__ == "__main__":
    unittest.main()
