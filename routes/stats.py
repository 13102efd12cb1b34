from flask import Blueprint, jsonify, send_file
from flask_login import login_required
from models.user import User
from routes.auth import self_or_admin_required
from helpers.stats import get_driver_stats, get_client_stats, count_active_orders
from datetime import datetime
import pandas as pd
import io

stats_bp = Blueprint('stats', __name__, url_prefix='/stats')

DRIVER_STATS_LABELS = {
    'total_orders': 'الطلبات المكتملة',
    'completed_today': 'المكتملة اليوم',
    'orders_this_month': 'المكتملة هذا الشهر',
    'earnings_today': 'أرباح اليوم',
    'earnings_week': 'أرباح الأسبوع',
    'earnings_month': 'أرباح الشهر',
    'total_earnings': 'إجمالي الأرباح',
    'active_orders': 'الطلبات النشطة',
    'rating': 'التقييم'
}


@stats_bp.route('/api/driver/<int:driver_id>')
@login_required
def driver_stats(driver_id):
    self_or_admin_required(driver_id)
    driver = User.query.get_or_404(driver_id)
    return jsonify({
        'driver': {'id': driver.id, 'name': driver.get_display_name()},
        'stats': get_driver_stats(driver.id)
    })


@stats_bp.route('/api/driver/<int:driver_id>/active')
@login_required
def driver_active_orders(driver_id):
    self_or_admin_required(driver_id)
    return jsonify({'active_orders': count_active_orders(driver_id)})


@stats_bp.route('/api/client/<int:client_id>')
@login_required
def client_stats(client_id):
    self_or_admin_required(client_id)
    client = User.query.get_or_404(client_id)
    return jsonify({
        'client': {'id': client.id, 'name': client.get_display_name()},
        'stats': get_client_stats(client.id, client.username)
    })


@stats_bp.route('/export/driver/<int:driver_id>')
@login_required
def export_driver_stats(driver_id):
    """تصدير إحصائيات السائق إلى ملف Excel"""
    self_or_admin_required(driver_id)
    driver = User.query.get_or_404(driver_id)
    stats = get_driver_stats(driver.id)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='xlsxwriter') as writer:
        workbook = writer.book

        # تنسيق العناوين
        header_format = workbook.add_format({
            'bold': True,
            'fg_color': '#D7E4BC',
            'border': 1,
            'align': 'center'
        })

        rows = [[label, stats[key]] for key, label in DRIVER_STATS_LABELS.items()]
        df = pd.DataFrame(rows, columns=['المؤشر', 'القيمة'])
        df.to_excel(writer, sheet_name='إحصائيات السائق', index=False)

        worksheet = writer.sheets['إحصائيات السائق']
        worksheet.right_to_left()
        for col_num, value in enumerate(df.columns.values):
            worksheet.write(0, col_num, value, header_format)
        worksheet.set_column(0, 0, 25)
        worksheet.set_column(1, 1, 15)

    output.seek(0)

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    filename = f'driver_{driver.id}_stats_{timestamp}.xlsx'

    return send_file(
        output,
        as_attachment=True,
        download_name=filename,
        mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
