import json

import pytest

from Notifier.Demo.weather_station import (
    EmailObserver,
    NotificationService,
    PhoneDisplay,
    SmsObserver,
    TVDisplay,
    WeatherStation,
    WebDashboard,
)
from Notifier.Events.dispatcher import Dispatcher
import main


def test_weather_station_broadcasts_to_displays():
    station = WeatherStation()
    phone, tv, web = PhoneDisplay(), TVDisplay(), WebDashboard()
    station.attach(phone)
    tv_handle = station.attach(tv)
    station.attach(web)

    report = station.set_weather("Sunny", 24)
    assert (report.attempted, report.succeeded) == (3, 3)
    for display in (phone, tv, web):
        assert display.received[0].data["condition"] == "Sunny"

    station.detach(tv_handle)
    report = station.set_weather("Rainy")
    assert report.attempted == 2
    assert len(tv.received) == 1
    assert phone.received[-1].data["condition"] == "Rainy"
    assert station.condition == "Rainy"


def test_recording_observer_accepts_plain_payloads():
    dispatcher = Dispatcher()
    display = WebDashboard()
    dispatcher.subscribe(display)
    report = dispatcher.publish("Sunny")
    assert (report.attempted, report.succeeded, report.failures) == (1, 1, ())
    assert display.received == ["Sunny"]


def test_weather_station_requires_condition():
    with pytest.raises(ValueError):
        WeatherStation().set_weather("")


def test_failing_display_is_reported():
    station = WeatherStation()
    station.attach(PhoneDisplay())
    broken = station.attach(TVDisplay(fail=True))
    report = station.set_weather("Cloudy")
    assert report.failed_handles() == [broken]
    assert "tv is unavailable" in report.failures[0].reason.message


def test_services_sharing_a_dispatcher_only_see_their_events():
    dispatcher = Dispatcher()
    station = WeatherStation(dispatcher)
    service = NotificationService(dispatcher)
    display = PhoneDisplay()
    email, sms = EmailObserver(), SmsObserver()
    station.attach(display)
    service.add_channel(email)
    sms_handle = service.add_channel(sms)

    report = service.send("Storm warning", severity="high")
    assert report.attempted == 2
    assert email.received[0].data["text"] == "Storm warning"
    assert sms.received[0].data["severity"] == "high"
    assert display.received == []

    service.remove_channel(sms_handle)
    assert service.send("All clear").attempted == 1


def test_cli_default_run(capsys, tmp_path, monkeypatch):
    monkeypatch.delenv("NOTIFIER_OBSERVER_TIMEOUT", raising=False)
    code = main.main(["--env-file", str(tmp_path / "none.env")])
    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert code == 0
    assert [line["reading"] for line in lines] == ["Sunny", "Rainy"]
    assert all(line["attempted"] == 3 and line["succeeded"] == 3 for line in lines)


def test_cli_reports_failing_display(capsys, tmp_path, monkeypatch):
    monkeypatch.delenv("NOTIFIER_OBSERVER_TIMEOUT", raising=False)
    code = main.main(["--env-file", str(tmp_path / "none.env"), "--reading", "Foggy:9.5", "--fail", "tv"])
    line = json.loads(capsys.readouterr().out.strip())
    assert code == 1
    assert line["reading"] == "Foggy"
    assert line["succeeded"] == 2
    assert len(line["failures"]) == 1


def test_cli_rejects_bad_configuration(capsys, tmp_path, monkeypatch):
    monkeypatch.setenv("NOTIFIER_OBSERVER_TIMEOUT", "zero")
    assert main.main(["--env-file", str(tmp_path / "none.env")]) == 2
    assert "NOTIFIER_OBSERVER_TIMEOUT" in capsys.readouterr().err


def test_parse_reading():
    assert main.parse_reading("Sunny") == ("Sunny", None)
    assert main.parse_reading("Sunny:21") == ("Sunny", 21.0)
