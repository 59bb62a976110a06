# sheets.py
import logging

import google.auth
from google.oauth2 import service_account
from googleapiclient.discovery import build

from dogmeet.errors import ConfigError

logger = logging.getLogger(__name__)

# ===== CONFIGURATION =====
WRITE_SCOPES = ['https://www.googleapis.com/auth/spreadsheets']
READ_SCOPES = ['https://www.googleapis.com/auth/spreadsheets.readonly']

# Columns A..G: date, time, dog name, address, first time, payment, notes
FIRST_COLUMN = 'A'
LAST_COLUMN = 'G'
FIRST_DATA_ROW = 2


class SheetsAppointmentStore:
    """
    Appointment rows kept in a Google Sheet.

    Exposes only append_row(values) and list_rows(). Every call
    authenticates and builds its own Sheets client, so nothing is shared
    between requests.
    """

    def __init__(self, spreadsheet_id, sheet_name='Sheet1', credentials_file=None):
        self.spreadsheet_id = spreadsheet_id
        self.sheet_name = sheet_name
        self.credentials_file = credentials_file

    @property
    def range(self) -> str:
        return f"{self.sheet_name}!{FIRST_COLUMN}{FIRST_DATA_ROW}:{LAST_COLUMN}"

    def _credentials(self, scopes):
        if self.credentials_file:
            return service_account.Credentials.from_service_account_file(
                self.credentials_file, scopes=scopes
            )
        # Application default credentials
        creds, _ = google.auth.default(scopes=scopes)
        return creds

    def _service(self, scopes):
        if not self.spreadsheet_id:
            raise ConfigError('SPREADSHEET_ID environment variable is not set')
        creds = self._credentials(scopes)
        return build('sheets', 'v4', credentials=creds, cache_discovery=False)

    def append_row(self, values) -> None:
        """Append one row below the last populated row of the range."""
        service = self._service(WRITE_SCOPES)
        service.spreadsheets().values().append(
            spreadsheetId=self.spreadsheet_id,
            range=self.range,
            valueInputOption='USER_ENTERED',
            insertDataOption='INSERT_ROWS',
            body={'values': [list(values)]},
        ).execute()
        logger.info("Appended row to %s", self.range)

    def list_rows(self) -> list:
        service = self._service(READ_SCOPES)
        response = service.spreadsheets().values().get(
            spreadsheetId=self.spreadsheet_id,
            range=self.range,
        ).execute()
        # The API omits "values" when the range is empty
        return response.get('values', [])


def store_from_config(config) -> SheetsAppointmentStore:
    return SheetsAppointmentStore(
        spreadsheet_id=config.get('SPREADSHEET_ID'),
        sheet_name=config.get('SHEET_NAME') or 'Sheet1',
        credentials_file=config.get('GOOGLE_APPLICATION_CREDENTIALS'),
    )
