import unittest

from pydantic import ValidationError

from weather_app.models import ErrorMessage, WeatherReport


def _report_kwargs(**overrides):
    kwargs = dict(
        city="Paris", country="FR", temperature=70, description="slight rain", icon="10d",
        feelsLike=69, humidity=90, windSpeed=9, pressure=1013, visibility=5, uvIndex=0,
        sunrise="5:25 AM", sunset="8:24 PM", cloudCover=75, dewPoint=68,
    )
    kwargs.update(overrides)
    return kwargs


class TestModels(unittest.TestCase):
    def test_weather_report_creation(self):
        report = WeatherReport(**_report_kwargs())
        self.assertEqual(report.feelsLike, 69)
        self.assertEqual(report.model_dump()["cloudCover"], 75)

    def test_dew_point_may_be_null(self):
        report = WeatherReport(**_report_kwargs(dewPoint=None))
        self.assertIn('"dewPoint":null', report.model_dump_json())

    def test_missing_field_rejected(self):
        kwargs = _report_kwargs()
        del kwargs["icon"]
        with self.assertRaises(ValidationError):
            WeatherReport(**kwargs)

    def test_error_message(self):
        self.assertEqual(ErrorMessage(message="nope").model_dump(), {"message": "nope"})


if __name__ == "__main__":
    unittest.main()
