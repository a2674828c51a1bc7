import unittest
import numpy as np
import pandas as pd
from pyosgb.coordinate.batch import convert_dataframe


class TestConvertDataFrame(unittest.TestCase):

    def setUp(self):
        self.df = pd.DataFrame({
            'time': [0.0, 1.0, 2.0, 3.0],
            'latitude': [51.5, 56.796891, 45.0, 60.155],
            'longitude': [-7.0 / 60.0, -5.003675, -2.0, -1.145],
            'height': [0.0, 1345.0, 0.0, 0.0],
        })

    def test_adds_columns(self):
        with self.assertLogs('pyosgb.coordinate.batch', level='WARNING'):
            out = convert_dataframe(self.df, height_col='height')
        self.assertEqual(list(out.columns),
                         ['time', 'latitude', 'longitude', 'height', 'easting', 'northing', 'grid_ref'])
        self.assertEqual(out['grid_ref'].tolist(),
                         ["TQ 30823 79577", "NN 16667 71287", "", "HU 47567 41476"])
        self.assertEqual(out['easting'].iloc[0], 530823.0)
        self.assertEqual(out['northing'].iloc[1], 771287.0)

    def test_input_untouched(self):
        convert_dataframe(self.df.iloc[[0, 1, 3]], height_col='height')
        self.assertNotIn('grid_ref', self.df.columns)

    def test_invalid_rows(self):
        df = pd.DataFrame({'lat': ['51.5', 'abc', None, '95.0'],
                           'lon': ['-0.11666667', '0.0', '0.0', '0.0']})
        with self.assertLogs('pyosgb.coordinate.batch', level='WARNING') as logs:
            out = convert_dataframe(df, lat_col='lat', lon_col='lon', digits=6)
        self.assertIn("3 of 4 rows", logs.output[-1])
        self.assertEqual(out['grid_ref'].iloc[0], "TQ 308 795")
        self.assertTrue(out['easting'].iloc[1:].isna().all())
        self.assertEqual(out['grid_ref'].iloc[1:].tolist(), ["", "", ""])

    def test_missing_column(self):
        with self.assertRaises(KeyError):
            convert_dataframe(self.df, lat_col='lat')
        with self.assertRaises(KeyError):
            convert_dataframe(self.df, height_col='alt')

    def test_empty(self):
        out = convert_dataframe(pd.DataFrame({'latitude': [], 'longitude': []}))
        self.assertEqual(len(out), 0)
        self.assertIn('grid_ref', out.columns)


if __name__ == '__main__':
    unittest.main()
