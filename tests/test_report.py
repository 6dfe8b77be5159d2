import tempfile
import unittest
from pathlib import Path

import matplotlib

from freqtext.utils.report import FrequencyComparison, compare_frequencies, plot_comparison


class TestCompareFrequencies(unittest.TestCase):
    def test_expected_and_actual_shares(self):
        comparison = compare_frequencies({'a': 3, 'b': 1}, 'aab', title='chars')
        self.assertEqual(comparison.labels, ['a', 'b'])
        self.assertEqual(comparison.expected, [0.75, 0.25])
        self.assertAlmostEqual(comparison.actual[0], 2 / 3)
        self.assertAlmostEqual(comparison.actual[1], 1 / 3)
        self.assertEqual(comparison.title, 'chars')

    def test_top_limits_labels_but_not_total(self):
        comparison = compare_frequencies({'x': 1, 'y': 6, 'z': 3}, ['y', 'q'], top=2)
        self.assertEqual(comparison.labels, ['y', 'z'])
        self.assertEqual(comparison.expected, [0.6, 0.3])
        self.assertEqual(comparison.actual, [0.5, 0.0])

    def test_ties_keep_source_order(self):
        comparison = compare_frequencies({'m': 2, 'k': 2, 'j': 2}, [])
        self.assertEqual(comparison.labels, ['m', 'k', 'j'])
        self.assertEqual(comparison.actual, [0.0, 0.0, 0.0])


class TestPlotComparison(unittest.TestCase):
    def test_chart_is_written(self):
        comparison = FrequencyComparison(['a', 'b'], [0.6, 0.4], [0.5, 0.5], 'Test')
        with tempfile.TemporaryDirectory() as tmp:
            path = plot_comparison(comparison, Path(tmp) / 'nested' / 'chart.png')
            self.assertTrue(path.is_file())
            self.assertGreater(path.stat().st_size, 0)

    def test_backend_is_left_alone(self):
        backend = matplotlib.get_backend()
        comparison = FrequencyComparison(['x'], [1.0], [1.0], 'Backend')
        with tempfile.TemporaryDirectory() as tmp:
            plot_comparison(comparison, Path(tmp) / 'chart.png')
        self.assertEqual(matplotlib.get_backend(), backend)


if __name__ == '__main__':
    unittest.main()
