import unittest

from weather_app.data_sources import CallableWeatherDataSource, GeocodeMatch
from weather_app.errors import CityNotFoundError, InvalidCoordinatesError, MissingQueryError
from weather_app.location_resolver import LocationQuery, ResolvedLocation, resolve


def _no_forecast(*_args):
    raise AssertionError("forecast should not be fetched by the resolver")


def _source(geocoder):
    return CallableWeatherDataSource(geocoder=geocoder, forecaster=_no_forecast)


class TestLocationQuery(unittest.TestCase):
    def test_city_is_trimmed(self):
        self.assertEqual(LocationQuery.from_params("  Paris ", None, None), LocationQuery(city="Paris"))

    def test_city_wins_over_coordinates(self):
        query = LocationQuery.from_params("Oslo", "40.7", "-74.0")
        self.assertEqual(query.city, "Oslo")
        self.assertIsNone(query.latitude)

    def test_coordinates_parsed(self):
        query = LocationQuery.from_params(None, "40.7", "-74.0")
        self.assertEqual(query, LocationQuery(latitude=40.7, longitude=-74.0))
        self.assertTrue(query.has_coordinates)

    def test_missing_inputs(self):
        for city, lat, lon in [(None, None, None), ("", None, None), ("   ", None, None),
                               (None, "40.7", None), (None, None, "-74.0"), ("", "", "")]:
            with self.assertRaises(MissingQueryError):
                LocationQuery.from_params(city, lat, lon)

    def test_unparseable_coordinates(self):
        with self.assertRaises(InvalidCoordinatesError) as ctx:
            LocationQuery.from_params(None, "north", "-74.0")
        self.assertEqual(ctx.exception.status_code, 400)


class TestResolve(unittest.TestCase):
    def test_coordinates_skip_geocoding(self):
        calls = []
        source = _source(lambda name: calls.append(name))

        loc = resolve(LocationQuery(latitude=40.7, longitude=-74.0), source)
        self.assertEqual(loc, ResolvedLocation(40.7, -74.0, "Current Location", "N/A"))
        self.assertEqual(calls, [])

    def test_out_of_range_coordinates_pass_through(self):
        source = _source(lambda name: None)
        loc = resolve(LocationQuery(latitude=123.0, longitude=-500.0), source)
        self.assertEqual((loc.latitude, loc.longitude), (123.0, -500.0))

    def test_country_code_is_upper_cased(self):
        source = _source(lambda name: GeocodeMatch(48.85, 2.35, "Paris", "fr", "France"))
        loc = resolve(LocationQuery(city="Paris"), source)
        self.assertEqual(loc.display_name, "Paris")
        self.assertEqual(loc.country_code, "FR")
        self.assertEqual((loc.latitude, loc.longitude), (48.85, 2.35))

    def test_country_name_fallback(self):
        source = _source(lambda name: GeocodeMatch(1.0, 2.0, "Somewhere", None, "Atlantis"))
        self.assertEqual(resolve(LocationQuery(city="Somewhere"), source).country_code, "Atlantis")

        source = _source(lambda name: GeocodeMatch(1.0, 2.0, "Somewhere", "", None))
        self.assertEqual(resolve(LocationQuery(city="Somewhere"), source).country_code, "N/A")

    def test_city_not_found(self):
        source = _source(lambda name: None)
        with self.assertRaises(CityNotFoundError) as ctx:
            resolve(LocationQuery(city="Xyzzyville"), source)
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertIn("not found", ctx.exception.message)

    def test_geocoder_receives_trimmed_name(self):
        seen = []

        def geocoder(name):
            seen.append(name)
            return GeocodeMatch(0.0, 0.0, "Lima", "pe", "Peru")

        resolve(LocationQuery(city=" Lima "), _source(geocoder))
        self.assertEqual(seen, ["Lima"])

    def test_empty_query(self):
        with self.assertRaises(MissingQueryError):
            resolve(LocationQuery(), _source(lambda name: None))


if __name__ == "__main__":
    unittest.main()
