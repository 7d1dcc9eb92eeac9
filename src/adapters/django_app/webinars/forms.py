"""
Django Forms para validação de entrada.

Forms validam a estrutura do payload antes de passar
para os Use Cases. Regras de negócio (teto, só aumentar)
ficam na Entity.
"""

from django import forms


class ChangeSeatsForm(forms.Form):
    """Body de POST /webinars/<id>/seats."""

    seats = forms.IntegerField(
        min_value=1,
        error_messages={
            'required': 'seats is required',
            'invalid': 'seats must be an integer',
            'min_value': 'seats must be a positive integer',
        },
    )

    def clean_seats(self):
        # IntegerField aceita "200" e 200.0; o body JSON exige número inteiro
        raw = self.data.get('seats')
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise forms.ValidationError(
                self.fields['seats'].error_messages['invalid'],
                code='invalid',
            )
        return self.cleaned_data['seats']

    def first_error(self) -> str:
        """Primeira mensagem de erro, para o body da resposta."""
        for errors in self.errors.values():
            return errors[0]
        return 'Invalid payload'
