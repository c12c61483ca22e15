from django import forms


class ExamFileUploadForm(forms.Form):
    file = forms.FileField(label="Exam file")

    subject_code = forms.CharField(
        label="Subject code",
        max_length=30,
    )

    subject_name = forms.CharField(
        label="Subject name",
        max_length=200,
        required=False,
    )


class ExamFileResubmitForm(forms.Form):
    file = forms.FileField(label="Revised file")
