"""Export and import routes for bookings (Excel)."""

from flask import Response, request
from flask_login import login_required

from blueprints.bookings.services.export_service import (
    EXPORT_FILENAME, XLSX_MIMETYPE, export_bookings_xlsx, import_bookings_from_excel
)
from utils.api_response import api_success, api_error
from utils.decorators import handle_api_errors


def register_routes(bp):
    """Register export routes on the bookings blueprint."""

    @bp.route('/export')
    @login_required
    @handle_api_errors('Excel export failed')
    def export_excel():
        """
        Export all bookings as bookings.xlsx.

        The workbook is fully built in memory before anything is sent.
        """
        content = export_bookings_xlsx()

        return Response(
            content,
            mimetype=XLSX_MIMETYPE,
            headers={
                'Content-Disposition': f'attachment; filename={EXPORT_FILENAME}',
                'Content-Length': str(len(content))
            }
        )

    @bp.route('/import', methods=['POST'])
    @login_required
    @handle_api_errors()
    def import_excel():
        """Create bookings from an uploaded .xlsx file (field 'file')."""
        file = request.files.get('file')
        if file is None or file.filename == '':
            return api_error('No file selected', status=400)

        if not file.filename.lower().endswith('.xlsx'):
            return api_error('File must be an Excel workbook (.xlsx)', status=400)

        result = import_bookings_from_excel(file)
        return api_success(**result)
