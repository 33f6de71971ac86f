from django import forms

from .weeks import WEEK_IDENTIFIER_RE


class TaskCreateForm(forms.Form):
    # stored and echoed exactly as sent
    description = forms.CharField(strip=False)

    def clean_description(self):
        # CharField would happily coerce numbers and lists to text
        raw = self.data.get("description")
        if not isinstance(raw, str):
            raise forms.ValidationError("description must be a string.", code="invalid")
        if not raw.strip():
            raise forms.ValidationError("description must not be blank.", code="blank")
        return raw


class TaskListForm(forms.Form):
    week = forms.RegexField(
        regex=WEEK_IDENTIFIER_RE,
        required=False,
        strip=False,
        error_messages={"invalid": "week must look like YYYY-Www, e.g. 2021-W05."},
    )
