from ...models.theme import Theme, ThemeSignal


BRIGHTNESS_THRESHOLD = 128


class ThemeClassifier:
    """
    Decides light/dark from a ThemeSignal.

    Rules are checked in order and the first match wins: an explicit dark
    class, a dark ``color-scheme``, then background brightness. Text
    brightness is recorded on the signal but does not take part.
    """

    def classify(self, signal: ThemeSignal) -> Theme:
        if signal.has_dark_class:
            return Theme.DARK
        if signal.color_scheme == "dark":
            return Theme.DARK
        if signal.background_brightness is not None:
            return Theme.DARK if signal.background_brightness < BRIGHTNESS_THRESHOLD else Theme.LIGHT
        return Theme.LIGHT
