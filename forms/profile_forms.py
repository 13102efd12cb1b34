from flask_wtf import FlaskForm
from flask_wtf.file import FileField, FileRequired
from wtforms import SubmitField


class AvatarForm(FlaskForm):
    # نوع الصورة يُحدد من محتوى الملف عند الرفع، accept للمتصفح فقط
    avatar = FileField('الصورة الشخصية', validators=[FileRequired()],
                       render_kw={'accept': 'image/jpeg,image/png,image/webp'})
    submit = SubmitField('رفع الصورة')
