"""
Speedometer Layout & Preference Declaration
Where each telemetry value is shown, and the user preference overrides.

Slot triples are [zone, row, position]:
    zone 0 = main column, 1 = bottom rows, 2+ = hidden
    [0, 0, 0]  main speed value (large, front & center)
    [0, 1, 4]  main column, 4th position (bottom of the column)
    [1, 3, 1]  bottom rows, 3rd row, first position (left side)
    [1, 1, 5]  bottom rows, 1st row, last position (right side)
    [2, 1, 0]  hidden

Main column holds 4 values (1-4 top to bottom), each bottom row holds 5
(1-5 left to right). Order in SPD_TBL does not matter.
"""

# ================== LAYOUT ==================

SPD_BOTTOM_ROWS = 3  # number of bottom rows

SPD_TBL = {
    "vehSpeed":   [0, 0, 0],
    "topSpeed":   [0, 1, 1],
    "avgSpeed":   [0, 1, 2],
    "gpsSpeed":   [0, 1, 3],
    "engSpeed":   [0, 1, 4],
    "outTemp":    [1, 1, 1],
    "inTemp":     [2, 1, 2],
    "coolTemp":   [1, 1, 2],
    "oilTemp":    [1, 1, 3],
    "oilPres":    [1, 1, 4],
    "tpmsFlTemp": [1, 2, 1],
    "tpmsFrTemp": [1, 2, 2],
    "tpmsRlTemp": [1, 2, 3],
    "tpmsRrTemp": [1, 2, 4],
    "tpmsFlPres": [1, 3, 1],
    "tpmsFrPres": [1, 3, 2],
    "tpmsRlPres": [1, 3, 3],
    "tpmsRrPres": [1, 3, 4],
    "trpTime":    [2, 1, 0],
    "trpIdle":    [2, 1, 0],
    "trpDist":    [2, 1, 0],
    "fuelLvl":    [2, 2, 0],
    "gpsHead":    [2, 2, 0],
    "gpsAlt":     [2, 2, 0],
    "gpsAltMM":   [2, 2, 0],
    "trpFuel":    [2, 2, 0],
    "gearPos":    [2, 3, 0],
    "gearLvr":    [2, 3, 0],
    "engTop":     [2, 3, 0],
    "avgFuel":    [2, 3, 0],
    "engLoad":    [2, 4, 0],
    "gpsLat":     [2, 4, 0],
    "gpsLon":     [2, 4, 0],
    "totFuel":    [2, 4, 0],
    "trpEngIdle": [2, 4, 0],
    "batSOC":     [2, 4, 0],
}

# Telemetry values the display knows how to fill
KNOWN_FIELDS = {
    "vehSpeed":   "Vehicle Speed",
    "topSpeed":   "Top Speed",
    "avgSpeed":   "Average Speed",
    "gpsSpeed":   "GPS Speed",
    "engSpeed":   "Engine Speed",
    "outTemp":    "Outside Temperature",
    "inTemp":     "Intake Temperature",
    "coolTemp":   "Coolant Temperature",
    "oilTemp":    "Oil Temperature",
    "oilPres":    "Oil Pressure",
    "tpmsFlTemp": "TPMS Front Left Temperature",
    "tpmsFrTemp": "TPMS Front Right Temperature",
    "tpmsRlTemp": "TPMS Rear Left Temperature",
    "tpmsRrTemp": "TPMS Rear Right Temperature",
    "tpmsFlPres": "TPMS Front Left Pressure",
    "tpmsFrPres": "TPMS Front Right Pressure",
    "tpmsRlPres": "TPMS Rear Left Pressure",
    "tpmsRrPres": "TPMS Rear Right Pressure",
    "trpTime":    "Trip Time",
    "trpIdle":    "Idle Time",
    "trpDist":    "Trip Distance",
    "fuelLvl":    "Fuel Gauge Level",
    "gpsHead":    "GPS Heading",
    "gpsAlt":     "Altitude",
    "gpsAltMM":   "Altitude Min/Max",
    "trpFuel":    "Trip Fuel Economy",
    "gearPos":    "Gear Position",
    "gearLvr":    "Transmission Lever Position",
    "engTop":     "Engine Top Speed",
    "avgFuel":    "Average Fuel Economy",
    "engLoad":    "Engine Load",
    "gpsLat":     "GPS Latitude",
    "gpsLon":     "GPS Longitude",
    "totFuel":    "Total Fuel Economy",
    "trpEngIdle": "Engine Idle Time",
    "batSOC":     "Battery Charge State (i-stop)",
}

# ================== PREFERENCE OVERRIDES ==================

# SORV values are only used when this is True; otherwise built-in defaults apply
OVERRIDE_SPEED = False

SORV = {
    "language": "DE",                   # EN, ES, DE, PL, SK, TR, FR, IT
    "isMPH": False,                     # True: MPH/Feet/MPG, False: KPH/Meter
    "barSpeedometerMod": True,          # start with the bar speedometer
    "speedMod": True,                   # multicontroller + mod features in classic mode
    "startAnalog": True,                # classic speedometer starts analog (False = digital)
    "StatusBarSpeedometer": True,       # small speedometer in the statusbar
    "sbTemp": False,                    # statusbar: outside temp & fuel eff. (False = compass & altitude)
    "original_background_image": False, # v4.2 background; opacity ignored when True
    "black_background_opacity": 0.0,    # 0.0 transparent .. 1.0 black
    "fuelEffunit_kml": False,           # km/L (False = L/100km)
    "tempIsF": False,                   # Fahrenheit (False = Celsius)
    "pressIsPsi": False,                # psi (False = bar)
    "engineSpeedBar": False,            # colored bar follows engine speed
    "hideSpeedBar": False,
    "speedAnimation": False,            # counter animation, lags the number by ~1s
    "analogColor": "Red",               # Red, Blue, Green, Yellow, Pink, Orange, Purple, Silver
    "barTheme": 0,                      # 0-5 (0 is default white)
    "fuelGaugeValueSuffix": "%",
    "fuelGaugeFactor": 100,             # tank capacity here + suffix "L" for litres
}
