from flask_wtf import FlaskForm
from wtforms import (BooleanField, IntegerField, SelectMultipleField, StringField,
                     SubmitField, TextAreaField)
from wtforms.validators import DataRequired, Length, Optional
from wtforms.widgets import CheckboxInput, ListWidget

from models.permission import ALL_PERMISSIONS, PERMISSION_ALIASES

PERMISSION_CHOICES = [(perm, perm.replace("_", " ").capitalize()) for perm in ALL_PERMISSIONS]
PERMISSION_CHOICES += [(alias, alias.replace("_", " ").capitalize())
                       for alias in PERMISSION_ALIASES]


class MultiCheckboxField(SelectMultipleField):
    """A multiple-select field displayed as checkboxes."""
    widget = ListWidget(prefix_label=False)
    option_widget = CheckboxInput()


class TranslationKeyForm(FlaskForm):
    key = StringField("Key", validators=[DataRequired(), Length(max=255)])
    description = TextAreaField("Description", validators=[Optional(), Length(max=2000)])
    context = TextAreaField("Context", validators=[Optional(), Length(max=2000)])
    submit = SubmitField("Create Key")


class TranslateForm(FlaskForm):
    language_id = IntegerField("Language", validators=[DataRequired()])
    value = TextAreaField("Translation", validators=[DataRequired()])
    submit = SubmitField("Save")


class LanguageForm(FlaskForm):
    code = StringField("Code", validators=[DataRequired(), Length(max=16)])
    name = StringField("Name", validators=[DataRequired(), Length(max=100)])
    is_source = BooleanField("Source language")
    minecraft_head = StringField("Head", validators=[Optional(), Length(max=255)])
    submit = SubmitField("Save")


class ApiKeyForm(FlaskForm):
    name = StringField("Name", validators=[DataRequired(), Length(max=100)])
    permissions = MultiCheckboxField("Permissions", choices=PERMISSION_CHOICES,
                                     validators=[DataRequired()])
    submit = SubmitField("Create API Key")
