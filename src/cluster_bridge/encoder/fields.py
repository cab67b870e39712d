"""Canonical field resolver chains for every supported simulation schema.

Paths without a prefix are SimHub's normalized game data; ``GameRawData.BeamNG``
and ``GameRawData.TruckValues`` are the raw BeamNG.drive and SCS truck
(ETS2/ATS) plugin trees.
"""

from __future__ import annotations

from cluster_bridge.encoder.resolver import FieldSpec

_BEAMNG = "GameRawData.BeamNG"
_TRUCK = "GameRawData.TruckValues"
_TRUCK_DASH = f"{_TRUCK}.CurrentValues.DashboardValues"
_TRUCK_LIGHTS = f"{_TRUCK}.CurrentValues.LightsValues"
_NEW_DATA = "DataCorePlugin.GameData.NewData"

CLOCK_PATH = "DataCorePlugin.CurrentDateTime"

# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

IGNITION = FieldSpec.flag("ignition", "EngineIgnitionOn")
ENGINE_RUNNING = FieldSpec.flag("engine_running", "EngineStarted")

OIL_TEMPERATURE = FieldSpec.numeric(
    "oil_temperature",
    "OilTemperature",
    f"{_BEAMNG}.electrics.oiltemp",
    f"{_TRUCK_DASH}.OilTemperature",
    "OilTemp",
    "WaterTemperature",
)

ENGINE_TEMPERATURE = FieldSpec.numeric(
    "engine_temperature",
    "WaterTemperature",
    f"{_TRUCK_DASH}.WaterTemperature",
)

RPM = FieldSpec.numeric("rpm", "Rpms", f"{_TRUCK_DASH}.RPM")
SPEED = FieldSpec.numeric("speed", "SpeedKmh")

FUEL_CURRENT = FieldSpec.numeric(
    "fuel_current", "Fuel", f"{_TRUCK_DASH}.FuelValue.Amount"
)
FUEL_CAPACITY = FieldSpec.numeric(
    "fuel_capacity", "MaxFuel", f"{_TRUCK}.ConstantsValues.CapacityValues.Fuel"
)

# ---------------------------------------------------------------------------
# Lights: each lamp is the OR of its per-schema signals
# ---------------------------------------------------------------------------

LIGHTS_SIDE = FieldSpec.flag(
    "lights_side", f"{_BEAMNG}.lightsState.lightbar", f"{_TRUCK_LIGHTS}.Parking"
)
LIGHTS_DIP = FieldSpec.flag(
    "lights_dip", f"{_BEAMNG}.lightsState.lowBeam", f"{_TRUCK_LIGHTS}.BeamLow"
)
LIGHTS_MAIN = FieldSpec.flag(
    "lights_main", f"{_BEAMNG}.lightsState.highBeam", f"{_TRUCK_LIGHTS}.BeamHigh"
)
LIGHTS_FRONT_FOG = FieldSpec.flag(
    "lights_front_fog", f"{_BEAMNG}.lightsState.fogLights", f"{_TRUCK_LIGHTS}.Beacon"
)

INDICATOR_LEFT = FieldSpec.flag(
    "indicator_left",
    f"{_NEW_DATA}.TurnIndicatorLeft",
    f"{_BEAMNG}.electrics.signal_L",
    f"{_TRUCK_LIGHTS}.BlinkerLeftActive",
)
INDICATOR_RIGHT = FieldSpec.flag(
    "indicator_right",
    f"{_NEW_DATA}.TurnIndicatorRight",
    f"{_BEAMNG}.electrics.signal_R",
    f"{_TRUCK_LIGHTS}.BlinkerRightActive",
)

# ---------------------------------------------------------------------------
# Chassis / drivetrain
# ---------------------------------------------------------------------------

HANDBRAKE = FieldSpec.flag(
    "handbrake",
    "Handbrake",
    f"{_TRUCK}.CurrentValues.MotorValues.BrakeValues.ParkingBrake",
)
ABS = FieldSpec.flag("abs", f"{_NEW_DATA}.ABSActive", "ABSActive")

GEAR = FieldSpec.raw("gear", "Gear")
REVERSE = FieldSpec.flag("reverse", f"{_TRUCK_DASH}.GearDashboards.reverse")

CLOCK = FieldSpec.raw("clock", CLOCK_PATH)
