"""Stores: setter-only mutation, wholesale replacement, listeners, lifecycle."""

import itertools

from payloads import current_weather_payload, preference_payload
from weatherdash.models.chat import Role
from weatherdash.models.city import DEFAULT_CITY, CityDTO
from weatherdash.models.preference import PreferenceDTO
from weatherdash.models.weather import CurrentWeatherDTO
from weatherdash.stores.chat import ChatStore
from weatherdash.stores.city import CityStore
from weatherdash.stores.preference import PreferenceStore
from weatherdash.stores.state import AppState
from weatherdash.stores.weather import WeatherStore


class TestWeatherStore:
    def test_initial_state(self):
        store = WeatherStore()
        assert store.current_weather is None
        assert store.hourly_forecast == []
        assert store.daily_forecast == []
        assert store.alerts == []
        assert store.loading is False
        assert store.error is None

    def test_setters_replace_slots(self):
        store = WeatherStore()
        first = CurrentWeatherDTO.model_validate(current_weather_payload())
        second = CurrentWeatherDTO.model_validate(current_weather_payload(temp=5.0))
        store.set_current_weather(first)
        store.set_current_weather(second)
        assert store.current_weather is second

        store.set_alerts(["a", "b"])
        store.set_alerts(["c"])
        assert store.alerts == ["c"]

    def test_clear_error_touches_only_error(self):
        store = WeatherStore()
        store.set_loading(True)
        store.set_error("boom")
        store.set_hourly_forecast(["h"])
        before = store.snapshot()

        store.clear_error()
        after = store.snapshot()
        assert after["error"] is None
        assert {k: v for k, v in after.items() if k != "error"} == {k: v for k, v in before.items() if k != "error"}


class TestCityStore:
    def test_default_and_replace(self):
        store = CityStore()
        assert store.current_city == DEFAULT_CITY
        paris = CityDTO(name="Paris", country="FR", lat=48.85, lon=2.35)
        store.set_current_city(paris)
        assert store.current_city is paris


class TestPreferenceStore:
    def test_defaults(self):
        assert PreferenceStore().preferences == PreferenceDTO.defaults()

    def test_full_replace_round_trip(self):
        store = PreferenceStore()
        prefs = PreferenceDTO.model_validate(preference_payload(showBarChart=False, windSpeedUnit="km/h"))
        store.set_preferences(prefs)
        assert store.preferences == prefs
        assert store.preferences.model_dump() == prefs.model_dump()


class TestChatStore:
    def test_add_in_order(self):
        store = ChatStore()
        store.add_message("user", "hi")
        store.add_message(Role.ASSISTANT, "hello")

        messages = store.messages
        assert [(m.role, m.content) for m in messages] == [(Role.USER, "hi"), (Role.ASSISTANT, "hello")]
        assert messages[0].timestamp < messages[1].timestamp
        assert messages[0].id != messages[1].id

    def test_same_tick_still_ordered(self):
        store = ChatStore(clock=lambda: 1000)
        a = store.add_message("user", "one")
        b = store.add_message("user", "two")
        assert (a.id, b.id) == (1000, 1001)

    def test_clock_is_used(self):
        ticks = itertools.count(5000, 10)
        store = ChatStore(clock=lambda: next(ticks))
        assert store.add_message("user", "x").timestamp == 5000
        assert store.add_message("assistant", "y").timestamp == 5010

    def test_clear(self):
        store = ChatStore()
        for i in range(3):
            store.add_message("user", str(i))
        store.clear_messages()
        assert store.messages == ()

    def test_loading(self):
        store = ChatStore()
        store.set_loading(True)
        assert store.loading is True


class TestListeners:
    def test_subscribe_and_unsubscribe(self):
        store = WeatherStore()
        seen = []
        unsubscribe = store.subscribe(lambda name, slot, value: seen.append((name, slot, value)))

        store.set_loading(True)
        unsubscribe()
        store.set_loading(False)
        unsubscribe()  # second call is a no-op
        assert seen == [("weather", "loading", True)]

    def test_close_drops_listeners(self):
        store = ChatStore()
        seen = []
        store.subscribe(lambda *args: seen.append(args))
        store.close()
        store.add_message("user", "hi")
        assert seen == []


class TestAppState:
    def test_independent_instances(self):
        a, b = AppState(), AppState()
        a.chat.add_message("user", "hi")
        assert b.chat.messages == ()
        assert a.weather is not b.weather

    def test_reset(self):
        state = AppState()
        state.weather.set_error("x")
        state.city.set_current_city(CityDTO(name="Oslo", country="NO", lat=59.9, lon=10.7))
        state.chat.add_message("user", "hi")
        state.reset()
        assert state.weather.error is None
        assert state.city.current_city == DEFAULT_CITY
        assert state.chat.messages == ()

    def test_close_is_idempotent(self):
        state = AppState()
        state.close()
        state.close()
        assert state.closed

    def test_custom_default_city(self):
        oslo = CityDTO(name="Oslo", country="NO", lat=59.9, lon=10.7)
        assert AppState(default_city=oslo).city.current_city == oslo
