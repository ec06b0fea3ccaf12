"""
Tests for the VoltKit HTTP routes.

Validates:
1. Raw text fields are parsed with SI prefixes and documented defaults apply
2. Calculator errors become 400 with the engine's message
3. Field parse failures report the first failing field
4. Unbounded results serialize as null
5. Reference-data GET routes
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

# Keep the shared client well clear of the limiter
os.environ.setdefault("RATE_LIMIT_PER_MINUTE", "10000")

from fastapi.testclient import TestClient

from voltkit.combination import ComponentKind, Configuration
from voltkit_api.main import app
from voltkit_api.models import CombineRequest

client = TestClient(app)


class TestHealth:

    def test_health(self):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_cors_allows_localhost(self):
        response = client.get("/api/health", headers={"Origin": "http://localhost:5173"})
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


class TestParseAndConvert:

    def test_parse_batch(self):
        response = client.post("/api/parse", json={"text": "4.7k, 10k 220nF"})
        assert response.status_code == 200
        results = response.json()["results"]
        assert [r["value"] for r in results] == pytest.approx([4700, 10000, 220e-9])
        assert results[2]["unit"] == "F"

    def test_parse_errors_are_values(self):
        """A bad token is reported in place; the request still succeeds."""
        response = client.post("/api/parse", json={"text": "1k abc"})
        assert response.status_code == 200
        results = response.json()["results"]
        assert results[0]["error"] is None
        assert "Invalid format" in results[1]["error"]

    def test_parse_empty(self):
        results = client.post("/api/parse", json={"text": "  "}).json()["results"]
        assert results == [{"raw": "", "value": None, "unit": None, "error": "Input cannot be empty"}]

    def test_convert_defaults(self):
        data = client.post("/api/convert", json={}).json()
        assert data["base_value"] == 4700
        assert data["formatted"] == "4.7kΩ"
        assert len(data["conversions"]) == 9

    def test_convert_frequency(self):
        data = client.post("/api/convert", json={"value": "1M", "quantity": "frequency"}).json()
        assert data["formatted"] == "1MHz"

    def test_convert_bad_value(self):
        response = client.post("/api/convert", json={"value": "nope"})
        assert response.status_code == 400
        assert "Invalid format" in response.json()["detail"]

    def test_convert_unknown_quantity_is_422(self):
        assert client.post("/api/convert", json={"quantity": "luminance"}).status_code == 422


class TestCombination:

    def test_default_resistors(self):
        """No values → 4.7k + 10k + 2.2k in series."""
        data = client.post("/api/combine", json={}).json()
        assert data["value"] == 16900
        assert data["formatted"] == "16.9kΩ"
        assert len(data["steps"]) == 3
        assert data["steps"][0]["kind"] == "formula"

    def test_default_capacitors(self):
        data = client.post("/api/combine", json={"kind": "capacitor", "configuration": "parallel"}).json()
        assert data["value"] == pytest.approx(300e-9)
        assert data["formatted"] == "300nF"

    def test_parallel_short(self):
        data = client.post(
            "/api/combine", json={"configuration": "parallel", "values": ["1k", "0"]},
        ).json()
        assert data["value"] == 0
        assert len(data["steps"]) == 1

    def test_empty_list_is_zero(self):
        data = client.post("/api/combine", json={"values": []}).json()
        assert data["value"] == 0
        assert data["steps"] == []

    def test_first_bad_field_reported(self):
        response = client.post("/api/combine", json={"values": ["1k", "abc", "xyz"]})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("R2: Invalid format")

    def test_engine_error_is_400(self):
        response = client.post(
            "/api/combine",
            json={"kind": "capacitor", "configuration": "series", "values": ["1u", "0"]},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Capacitor values cannot be zero (would block DC)"

    def test_unknown_kind_is_422(self):
        assert client.post("/api/combine", json={"kind": "diode"}).status_code == 422

    def test_request_uses_engine_enums(self):
        request = CombineRequest(kind="inductor", configuration="parallel")
        assert request.kind is ComponentKind.INDUCTOR
        assert request.configuration is Configuration.PARALLEL

    def test_equivalent(self):
        data = client.post("/api/equivalent", json={"values": ["100", "200"]}).json()
        assert data["formatted"] == "300.0000 Ω"
        assert data["steps"] == ["Sum of all resistances: 100 + 200 = 300.0000 Ω"]

    def test_equivalent_empty_rejected(self):
        response = client.post("/api/equivalent", json={"values": []})
        assert response.status_code == 400
        assert response.json()["detail"] == "At least one resistance value required"


class TestCircuits:

    def test_led_defaults(self):
        """5V, 2.0V, 20mA → 150Ω."""
        data = client.post("/api/led-resistor", json={}).json()
        assert data["nearest_e24"] == pytest.approx(150)
        assert data["formatted_resistor"] == "150Ω"
        assert data["suggested_wattage"] == 0.125
        assert len(data["steps"]) == 8

    def test_led_forward_above_source(self):
        response = client.post("/api/led-resistor", json={"v_forward": "5"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Forward voltage must be less than source voltage"

    def test_ohms_law(self):
        data = client.post("/api/ohms-law", json={"voltage": "12", "resistance": "1k"}).json()
        assert data["current"] == pytest.approx(0.012)
        assert data["power"] == pytest.approx(0.144)

    def test_ohms_law_blank_field_is_missing(self):
        response = client.post("/api/ohms-law", json={"voltage": "12", "resistance": " "})
        assert response.status_code == 400
        assert response.json()["detail"] == "Must provide exactly two known values"

    def test_ohms_law_infinite_resistance_is_null(self):
        data = client.post("/api/ohms-law", json={"voltage": "10", "current": "0"}).json()
        assert data["resistance"] is None
        assert data["steps"][1]["result"] is None
        assert data["steps"][1]["formatted"] == "InfinityΩ"

    def test_rc_defaults(self):
        """10kΩ × 100nF → τ = 1ms."""
        data = client.post("/api/rc-time-constant", json={}).json()
        assert data["time_constant"] == pytest.approx(1e-3)
        assert data["formatted_time_constant"] == "1ms"
        assert data["formatted_cutoff"] == "159Hz"
        assert len(data["rise_times"]) == 5

    def test_rc_invalid(self):
        response = client.post("/api/rc-time-constant", json={"resistance": "0"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Resistance must be positive"

    def test_divider_unloaded(self):
        data = client.post("/api/voltage-divider", json={}).json()
        assert data["v_out"] == pytest.approx(6)
        assert data["v_out_loaded"] is None

    def test_divider_loaded(self):
        data = client.post("/api/voltage-divider", json={"r_load": "5k"}).json()
        assert data["v_out_loaded"] == pytest.approx(3)
        assert data["load_effect"] == pytest.approx(50)
        assert data["load_warning"].startswith("Load resistance (5000Ω)")

    def test_divider_bad_field(self):
        response = client.post("/api/voltage-divider", json={"r1": "x"})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("R1: ")


class TestBattery:

    def test_runtime_defaults(self):
        """2000mAh at 100mA → 20h."""
        data = client.post("/api/battery-life", json={}).json()
        assert data["solve"] == "runtime"
        assert data["runtime"]["hours"] == 20
        assert data["runtime"]["formatted"] == "20h 0m"

    def test_required_capacity(self):
        data = client.post("/api/battery-life", json={
            "solve": "capacity", "load_current_ma": 50, "runtime_hours": 10, "efficiency": 80,
        }).json()
        assert data["capacity_mah"] == pytest.approx(625)
        assert data["runtime"] is None

    def test_max_load(self):
        data = client.post("/api/battery-life", json={
            "solve": "load_current", "capacity_mah": 2000, "runtime_hours": 20,
        }).json()
        assert data["load_current_ma"] == pytest.approx(100)

    def test_invalid_capacity(self):
        response = client.post("/api/battery-life", json={"capacity_mah": 0})
        assert response.status_code == 400
        assert response.json()["detail"] == "Battery capacity must be greater than 0 mAh"

    def test_missing_input(self):
        response = client.post("/api/battery-life", json={"solve": "capacity", "load_current_ma": None})
        assert response.status_code == 400
        assert "load_current_ma is required" in response.json()["detail"]

    def test_battery_list(self):
        data = client.get("/api/batteries").json()
        assert data["total"] == 11
        names = [b["name"] for b in data["batteries"]]
        assert "CR2032" in names


class TestColorCode:

    def test_decode_default(self):
        """brown-red-red-gold → 1.2kΩ ±5%."""
        data = client.post("/api/color-code/decode", json={}).json()
        assert data["value"] == 1200
        assert data["formatted"] == "1200 Ω"
        assert data["tolerance"] == "±5%"

    def test_decode_5band(self):
        data = client.post("/api/color-code/decode", json={
            "bands": 5, "colors": ["brown", "black", "black", "red", "brown"],
        }).json()
        assert data["value"] == 10000
        assert data["temp_coeff"] == "50 ppm/K"

    def test_decode_error(self):
        response = client.post("/api/color-code/decode", json={"colors": ["black", "brown", "red", "gold"]})
        assert response.status_code == 400
        assert response.json()["detail"] == "First band cannot be black"

    def test_encode(self):
        data = client.post("/api/color-code/encode", json={"resistance": "4.7k"}).json()
        assert data["colors"] == ["yellow", "violet", "red", "gold"]
        assert data["formatted"] == "yellow-violet-red-gold"

    def test_encode_unencodable(self):
        response = client.post("/api/color-code/encode", json={"resistance": "4.7"})
        assert response.status_code == 400

    def test_colors(self):
        data = client.get("/api/color-code/colors").json()
        assert len(data["colors"]) == 11
        assert "gold" in data["tolerance_colors"]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
