from domain.form.model import FormField, InputForm, WidgetControl, build_form_field

__all__ = ["FormField", "InputForm", "WidgetControl", "build_form_field"]
