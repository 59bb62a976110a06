from dogmeet import create_app
from dogmeet.config import validate_config
from dogmeet.sheets import SheetsAppointmentStore


def test_validate_config_reports_missing_spreadsheet_id():
    assert validate_config({"SPREADSHEET_ID": None}) == ["SPREADSHEET_ID"]
    assert validate_config({"SPREADSHEET_ID": ""}) == ["SPREADSHEET_ID"]
    assert validate_config({"SPREADSHEET_ID": "abc"}) == []


def test_create_app_builds_sheets_store_from_config():
    app = create_app({
        "TESTING": True,
        "SPREADSHEET_ID": "abc",
        "SHEET_NAME": "Dogs",
        "GOOGLE_APPLICATION_CREDENTIALS": "/tmp/creds.json",
    })
    store = app.extensions["appointment_store"]
    assert isinstance(store, SheetsAppointmentStore)
    assert store.spreadsheet_id == "abc"
    assert store.range == "Dogs!A2:G"
    assert store.credentials_file == "/tmp/creds.json"


def test_create_app_does_not_fail_without_spreadsheet_id(caplog):
    app = create_app({"TESTING": True, "SPREADSHEET_ID": None})
    assert app is not None
    assert "SPREADSHEET_ID is not set" in caplog.text
