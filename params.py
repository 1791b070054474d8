from typing import List, Dict


# Bin thresholds for wet-bulb temperature (°C), ascending.
# N thresholds split the number line into N+1 half-open buckets:
# (-inf, 10), [10, 14), ..., [30, 32), [32, inf)
BINS: List[float] = [10, 14, 18, 22, 26, 30, 32]

# One color per bucket, coolest to hottest
BIN_COLORS: List[str] = [
    "#FDFDFD",
    "#FCF0DA",
    "#F5CA98",
    "#E8885A",
    "#BF3B23",
    "#801B0A",
    "#4A0E04",
    "#000000",
]

# Regions with no measurement for the rendered year
NO_DATA_COLOR = "#8C8C8C"
NO_DATA_LABEL = "No data"

MEASUREMENT_FIELD = "wetbulb_C"

# Scroll trigger line as a fraction of viewport height
SCROLL_OFFSET: float = 0.5
STEP_SPACING_PX: int = 200
STEP_HEIGHT_PX: int = 160
SPACER_HEIGHT_PX: int = 200
DEFAULT_VIEWPORT_HEIGHT: int = 800

# Map visibility transitions (fractions of viewport height)
CA_HIDE_FRACTION: float = 0.6
US_SHOW_FRACTION: float = 0.5

# Tooltip offset from the pointer, in px
TOOLTIP_OFFSET_PX: int = 15

# Trend plots
TREND_MIN_POINTS: int = 4

CA_YEAR_TEXT: Dict[int, str] = {
    2020: 'The highest Wet-Bulb Temperature was in Riverside County, at only 18.74 °C. With the lowest in Mono County at 12.83 °C. We start with Mono, Madera, Lassen, and Modoc counties at the 10-14 °C range.',
    2028: 'In only 8 years, Riverside County hit 42.45 °C, a 2.71 degree Celcius increase in Wet-Bulb Temperature. The lowest remains to be Mono County at 14.24 °C with only a 1.24 degree Celcius increase.',
    2036: 'In just another 8 years, Riverside County hits 22.11 °C, a 3.36 degree Celcius increase. ',
    2040: 'By 2040, both Riverside and San Bernandino County increases by at least 5 °C since 2020, getting closer towards dangerous Wet-Bulb Temperature levels.',
    2060: '2 decades later, and although the Wet-Bulb Temperatures are not as high as they used to be, they are still higher than they were in 2020 by at least 1.27 °C.',
    2072: 'By 2072, California continues to darken as we head towards 2100. Mono, Madera, Lassen, and Modoc Counties that had the lowest Wet-Bulb Temperatures in 2020 have risen to the 14-18 degree Celcius range.',
    2100: 'In 2100, although not as high in 2036, the overall Wet-Bulb Temperature has increased over time, with a minimum increase of 2.11 °C in Inyo County.',
}

US_YEAR_TEXT: Dict[int, str] = {
    2016: 'In 2016, the hottest states were Texas and Florida at 25.49°C and 26.48°C, while Alaska was the coolest at 11.97°C.',
    2028: 'By 2028, Alaska, the coolest state thus far has increased by 1.59°C, at 13.56°C. Texas and Florida, the previously hottest states so far have also increased, even if by less than 1°C.',
    2032: '4 years later, the Midwest and Southeast regions of the US show a noticeable rise in Wet-Bulb temperatures, especially Texas, Louisiana, Florida, and South Carolina.',
    2040: 'In just another 8 years, the entire US sees an increase in Wet-Bulb Temperatures, as parts of the West Coast and Northern Midwest jump up to at least 22°C.',
    2044: 'This is the first year that any part of the US reaches a Wet-Bulb Temperature of at least 26°C and stays at that range.',
    2064: "Here we see Alaska's Wet-Bulb Temperature hit 14.18°C, a 2.32°C increase from 2016. As the state that was historically the coolest, this is it's turning point where it continues to climb.",
    2072: '10 states hit the range of 26-30°C, and even Alaska, the coolest state historically has increase by 2.52°C since 2016, at 14.49°C.',
    2092: 'By 2092, 9 states are in the 26-30°C range, with 24 states in the 22-26°C range, a stark difference from the Wet-Bulb Temperatures in 2016.',
    2100: 'Once we hit the end of the century, 8 states in the US reach at least or almost to 28°C, only 2°C away from the dangerous Wet-Bulb Temperature of 30°C.',
}
