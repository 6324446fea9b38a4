from __future__ import annotations

import streamlit as st

from .base_component import BaseComponent
from user_directory.models import Gender


FORM_GENERATION_KEY = "user_form_generation"


def bump_form_generation() -> None:
    """Rotate widget keys so a newly opened form starts from the draft values."""
    st.session_state[FORM_GENERATION_KEY] = int(st.session_state.get(FORM_GENERATION_KEY, 0)) + 1


class UserFormModal(BaseComponent):
    """Add/edit user form.

    Every widget forwards its change to the matching `FormSession` setter,
    so sanitising (pin) and dependent updates (state -> city) happen in the
    controller. Submit validates and commits; errors render under fields.
    """

    def _key(self, field: str) -> str:
        return f"user_form_{field}_{st.session_state.get(FORM_GENERATION_KEY, 0)}"

    def _on_change(self, field: str) -> None:
        form = self.session.form
        form.set_field(field, st.session_state.get(self._key(field)) or "")
        if field == "state":
            # City options changed; drop the stale widget value
            st.session_state.pop(self._key("city"), None)
        elif field == "pin":
            # Reflect the sanitised value back into the widget
            st.session_state[self._key("pin")] = form.draft.address.pin

    def _label(self, field: str, required: bool = True) -> str:
        label = self.text(f"formFields.{field}", field)
        return f"{label} *" if required else label

    def _show_error(self, field: str) -> None:
        message = self.session.form.error_for(field)
        if message:
            st.caption(f":red[{message}]")

    def _seed(self, field: str, value: str) -> str:
        """Initialise the widget value from the draft once per form generation."""
        key = self._key(field)
        if key not in st.session_state:
            st.session_state[key] = value
        return key

    def _text_field(self, field: str, value: str, required: bool = True, max_chars: int | None = None) -> None:
        st.text_input(
            self._label(field, required),
            key=self._seed(field, value),
            placeholder=self.text(f"placeholders.{field}"),
            max_chars=max_chars,
            on_change=self._on_change,
            args=(field,),
        )
        self._show_error(field)

    def _select_field(self, field: str, options: list[str], value: str) -> None:
        choices = [""] + options
        st.selectbox(
            self._label(field),
            options=choices,
            key=self._seed(field, value if value in choices else ""),
            format_func=lambda o: o or self.text(f"placeholders.{field}", "-"),
            on_change=self._on_change,
            args=(field,),
        )
        self._show_error(field)

    def _on_submit(self) -> None:
        user = self.session.form.submit()
        if user is not None:
            bump_form_generation()

    def _on_cancel(self) -> None:
        self.session.form.cancel()
        bump_form_generation()

    def render(self) -> None:
        form = self.session.form
        if not form.is_open:
            return
        draft = form.draft

        with st.container(border=True):
            st.subheader(form.title)
            c1, c2 = st.columns(2)
            with c1:
                self._text_field("name", draft.name)
                self._text_field("linkedinUrl", draft.linkedin_url)
                self._text_field("line1", draft.address.line1)
                self._select_field("state", form.states, draft.address.state)
                self._text_field("pin", draft.address.pin, max_chars=self.session.config.validation.pin_max_length)
            with c2:
                self._text_field("email", draft.email)
                self._select_field("gender", Gender.values(), draft.gender)
                self._text_field("line2", draft.address.line2, required=False)
                self._select_field("city", form.cities, draft.address.city)

            b1, b2, _ = st.columns([1, 1, 4])
            with b1:
                submit_label = self.text("updateButton") if form.editing_user else self.text("saveButton")
                st.button(submit_label, type="primary", key=self._key("submit"), on_click=self._on_submit)
            with b2:
                st.button(self.text("cancelButton"), key=self._key("cancel"), on_click=self._on_cancel)


def render_user_form(session) -> None:
    UserFormModal(session).render()


__all__ = ["UserFormModal", "bump_form_generation", "render_user_form"]
