"""Weather analysis: flight category classification."""

from dataclasses import replace

from nimbus_wx.weather.models import WeatherConditions, FlightCategory


class FlightCategoryClassifier:
    """
    Derive the FAA flight category from ceiling and visibility.

    Rules are checked in order and the first match wins:
        LIFR:  ceiling < 500 ft   or  visibility < 1 SM
        IFR:   ceiling < 1000 ft  or  visibility < 3 SM
        MVFR:  ceiling <= 3000 ft or  visibility <= 5 SM
        VFR:   otherwise

    The MVFR bounds are inclusive while the LIFR and IFR bounds are strict.
    """

    @staticmethod
    def classify(ceiling_ft: float, visibility_sm: float) -> FlightCategory:
        if ceiling_ft < 500 or visibility_sm < 1:
            return FlightCategory.LIFR
        if ceiling_ft < 1000 or visibility_sm < 3:
            return FlightCategory.IFR
        if ceiling_ft <= 3000 or visibility_sm <= 5:
            return FlightCategory.MVFR
        return FlightCategory.VFR


def classify(ceiling_ft: float, visibility_sm: float) -> FlightCategory:
    """Flight category for a ceiling in feet and a visibility in statute miles."""
    return FlightCategoryClassifier.classify(ceiling_ft, visibility_sm)


class WeatherAnalyzer:
    """
    Aviation weather analysis on decoded conditions.

    All methods are static, pure functions with no state.
    """

    @staticmethod
    def flight_category(conditions: WeatherConditions) -> FlightCategory:
        """Flight category for decoded conditions."""
        return classify(conditions.ceiling_ft, conditions.visibility_sm)

    @staticmethod
    def classified(conditions: WeatherConditions) -> WeatherConditions:
        """Copy of the conditions with the flight category filled in."""
        return replace(conditions, flight_category=WeatherAnalyzer.flight_category(conditions))

