"""
Booking spreadsheet export and import.
Builds the bookings.xlsx workbook in memory and reads workbooks in the
same layout back into new bookings.
"""

import io
import logging
import zipfile
from datetime import datetime, date
from typing import Dict, Any, List

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils.exceptions import InvalidFileException

from database import PersistenceError
from models.booking import DATE_FIELDS, get_all_bookings
from utils.helpers import format_date, format_datetime

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
EXPORT_FILENAME = 'bookings.xlsx'

# (field, header) in sheet order
EXPORT_COLUMNS = [
    ('id', 'ID'),
    ('grc_no', 'GRC No'),
    ('booking_date', 'Booking Date'),
    ('check_in_date', 'Check-In Date'),
    ('check_out_date', 'Check-Out Date'),
    ('days', 'Days'),
    ('time_in', 'Time In'),
    ('time_out', 'Time Out'),
    ('salutation', 'Salutation'),
    ('name', 'Name'),
    ('age', 'Age'),
    ('gender', 'Gender'),
    ('address', 'Address'),
    ('city', 'City'),
    ('nationality', 'Nationality'),
    ('mobile_no', 'Mobile No'),
    ('email', 'Email'),
    ('phone_no', 'Phone No'),
    ('birth_date', 'Birth Date'),
    ('anniversary', 'Anniversary'),
    ('company_name', 'Company Name'),
    ('company_gstin', 'Company GSTIN'),
    ('id_proof_type', 'ID Proof Type'),
    ('id_proof_number', 'ID Proof Number'),
    ('photo_url', 'Photo URL'),
    ('id_proof_image_url', 'ID Proof Image 1'),
    ('id_proof_image_url2', 'ID Proof Image 2'),
    ('room_no', 'Room No'),
    ('plan_package', 'Plan Package'),
    ('no_of_adults', 'Adults'),
    ('no_of_children', 'Children'),
    ('rate', 'Rate'),
    ('tax_included', 'Tax Included'),
    ('service_charge', 'Service Charge'),
    ('is_leader', 'Leader'),
    ('arrived_from', 'Arrived From'),
    ('destination', 'Destination'),
    ('remark', 'Remark'),
    ('business_source', 'Business Source'),
    ('market_segment', 'Market Segment'),
    ('purpose_of_visit', 'Purpose of Visit'),
    ('discount_percent', 'Discount %'),
    ('discount_room_source', 'Discount Source'),
    ('payment_mode', 'Payment Mode'),
    ('payment_status', 'Payment Status'),
    ('booking_ref_no', 'Booking Ref No'),
    ('mgmt_block', 'Mgmt Block'),
    ('billing_instruction', 'Billing Instruction'),
    ('temperature', 'Temperature'),
    ('from_csv', 'From CSV'),
    ('epabx', 'EPABX'),
    ('vip', 'VIP'),
    ('status', 'Status'),
    ('created_at', 'Created At'),
    ('updated_at', 'Updated At'),
]

DATETIME_EXPORT_FIELDS = frozenset([
    'booking_date', 'check_in_date', 'check_out_date', 'created_at', 'updated_at',
])
DATE_EXPORT_FIELDS = frozenset(['birth_date', 'anniversary'])

# Columns assigned by the store or by create, never imported
IMPORT_SKIPPED_FIELDS = frozenset(['id', 'grc_no', 'created_at', 'updated_at'])

IMPORT_DATE_FORMATS = ['%d/%m/%Y %H:%M:%S', '%d/%m/%Y %H:%M', '%d/%m/%Y', '%d-%m-%Y']


def _export_value(field: str, booking: Dict[str, Any]):
    value = booking.get(field)
    if field in DATETIME_EXPORT_FIELDS:
        return format_datetime(value)
    if field in DATE_EXPORT_FIELDS:
        return format_date(value)
    return value


def build_bookings_workbook(bookings: List[Dict[str, Any]]) -> Workbook:
    """
    Build the bookings workbook.

    Args:
        bookings: Booking dicts, one row each

    Returns:
        openpyxl Workbook with a header row and one row per booking
    """
    wb = Workbook()
    ws = wb.active
    ws.title = 'Bookings'

    header_font = Font(bold=True, color='FFFFFF', size=11)
    header_fill = PatternFill(start_color='1A3A5C', end_color='1A3A5C', fill_type='solid')
    header_alignment = Alignment(horizontal='center', vertical='center', wrap_text=True)
    thin_border = Border(
        left=Side(style='thin', color='D4D4D4'),
        right=Side(style='thin', color='D4D4D4'),
        top=Side(style='thin', color='D4D4D4'),
        bottom=Side(style='thin', color='D4D4D4')
    )

    for col, (_, header) in enumerate(EXPORT_COLUMNS, 1):
        cell = ws.cell(row=1, column=col, value=header)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = header_alignment
        cell.border = thin_border
        ws.column_dimensions[cell.column_letter].width = max(len(header) + 4, 12)

    # Freeze header row
    ws.freeze_panes = 'A2'

    for booking in bookings:
        ws.append([_export_value(field, booking) for field, _ in EXPORT_COLUMNS])

    return wb


def export_bookings_xlsx() -> bytes:
    """
    Export every booking to an .xlsx file held in memory.

    Returns:
        Workbook bytes
    """
    bookings = get_all_bookings()
    wb = build_bookings_workbook(bookings)

    output = io.BytesIO()
    wb.save(output)

    logger.info(f'Exported {len(bookings)} bookings')
    return output.getvalue()


# =============================================================================
# IMPORT
# =============================================================================

def _build_header_map(header_row) -> Dict[int, str]:
    """Map column index -> field name from a header row."""
    lookup = {}
    for field, header in EXPORT_COLUMNS:
        lookup[header.lower()] = field
        lookup[field] = field

    column_map = {}
    for col_idx, value in enumerate(header_row):
        if value is None:
            continue
        field = lookup.get(str(value).strip().lower())
        if field and field not in IMPORT_SKIPPED_FIELDS:
            column_map[col_idx] = field
    return column_map


def _import_value(field: str, value):
    """Normalize a cell value for the create service."""
    if isinstance(value, datetime):
        return value.isoformat(timespec='seconds')
    if isinstance(value, date):
        return value.isoformat()
    if field in DATE_FIELDS and isinstance(value, str):
        text = value.strip()
        for fmt in IMPORT_DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
            except ValueError:
                continue
            if fmt in ('%d/%m/%Y', '%d-%m-%Y'):
                return parsed.date().isoformat()
            return parsed.isoformat(timespec='seconds')
        return text
    return value


def import_bookings_from_excel(file_obj) -> Dict[str, Any]:
    """
    Create bookings from an .xlsx workbook in the export layout.

    Header row 1 is matched against export headers or field names.
    Each data row becomes a new booking flagged from_csv; row failures
    are collected rather than aborting the import.

    Args:
        file_obj: Binary file-like object with the workbook

    Returns:
        Dict with 'created', 'total' and 'errors' ({'row', 'error'} dicts)

    Raises:
        ValueError: If the file is not a readable workbook or has no known columns
    """
    from blueprints.bookings.services.booking_service import create_booking

    try:
        wb = load_workbook(io.BytesIO(file_obj.read()), data_only=True, read_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
        raise ValueError('Invalid Excel file') from e

    ws = wb.active
    rows = ws.iter_rows(values_only=True)
    header_row = next(rows, None)
    column_map = _build_header_map(header_row or ())
    if not column_map:
        wb.close()
        raise ValueError('No booking columns found in header row')

    result = {
        'created': 0,
        'total': 0,
        'errors': [],
    }

    for row_num, row in enumerate(rows, 2):
        if row is None or all(value is None or value == '' for value in row):
            continue

        result['total'] += 1
        body = {}
        for col_idx, field in column_map.items():
            if col_idx < len(row) and row[col_idx] is not None:
                body[field] = _import_value(field, row[col_idx])
        body['from_csv'] = True

        try:
            create_booking(body)
            result['created'] += 1
        except (ValueError, PersistenceError) as e:
            logger.error(f'Error importing row {row_num}: {e}', exc_info=True)
            result['errors'].append({'row': row_num, 'error': str(e)})

    wb.close()
    logger.info(f"Imported {result['created']} of {result['total']} booking rows")
    return result
