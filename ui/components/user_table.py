from __future__ import annotations

import streamlit as st

from .base_component import BaseComponent
from .user_form import bump_form_generation
from ui.services import DirectoryService
from user_directory.models import User


class UserTable(BaseComponent):
    """User table with expandable address rows and row actions.

    - Shows a loading notice until the store is hydrated
    - Edit/Delete buttons honour the `features` toggles
    - Footer reports the user count; CSV export via `DirectoryService`
    """

    def _open_create(self) -> None:
        self.session.form.open_for_create()
        bump_form_generation()

    def _open_edit(self, user: User) -> None:
        self.session.form.open_for_edit(user)
        bump_form_generation()

    def render(self) -> None:
        table = self.session.table

        head, action = st.columns([4, 1])
        with head:
            st.title(self.text("pageTitle"))
            st.caption(self.text("pageSubtitle"))
        with action:
            st.button(self.text("addUserButton"), type="primary", key="users_add_btn", on_click=self._open_create)

        if table.is_loading:
            st.info(self.text("loading"))
            return

        if table.is_empty:
            st.info(f"**{self.text('noUsersFound')}**  \n{self.text('noUsersSubtext')}")
            return

        widths = [2, 3, 2, 1, 3, 2]
        headers = ["name", "email", "linkedin", "gender", "address", "actions"]
        cols = st.columns(widths)
        for col, h in zip(cols, headers):
            col.markdown(f"**{self.text(f'tableHeaders.{h}').upper()}**")
        st.divider()

        for row in table.rows():
            user = row.user
            cols = st.columns(widths)
            cols[0].markdown(f"`{row.initial}` {user.name}")
            cols[1].write(user.email)
            cols[2].markdown(f"[{self.text('viewProfile')}]({user.linkedin_url})")
            cols[3].write(user.gender)
            with cols[4]:
                arrow = "▲" if row.expanded else "▼"
                st.button(
                    f"{row.location} {arrow}",
                    key=f"users_expand_{user.id}",
                    help=row.pin_line,
                    on_click=table.toggle_expand,
                    args=(user.id,),
                )
                st.caption(row.pin_line)
            with cols[5]:
                if table.can_edit:
                    st.button(self.text("editButton"), key=f"users_edit_{user.id}", on_click=self._open_edit, args=(user,))
                if table.can_delete:
                    st.button(self.text("deleteButton"), key=f"users_delete_{user.id}", on_click=table.request_delete, args=(user,))

            if row.expanded:
                with st.container(border=True):
                    st.markdown(f"**{self.text('completeAddress')}**")
                    detail_cols = st.columns(len(row.address_details))
                    for col, detail in zip(detail_cols, row.address_details):
                        col.caption(detail.label)
                        col.write(detail.value)

        st.divider()
        foot, export = st.columns([4, 1])
        foot.caption(table.footer_text())
        with export:
            st.download_button(
                label=self.text("exportButton"),
                data=DirectoryService(self.session.store).export_csv(),
                file_name="users.csv",
                mime="text/csv",
                key="users_export_btn",
            )


class DeleteConfirmation(BaseComponent):
    """Confirmation prompt for the user pending deletion."""

    def render(self) -> None:
        table = self.session.table
        if table.pending_delete is None:
            return
        with st.container(border=True):
            st.subheader(self.text("deleteConfirmTitle"))
            st.write(table.delete_prompt())
            c1, c2, _ = st.columns([1, 1, 4])
            with c1:
                st.button(self.text("cancelButton"), key="users_delete_cancel", on_click=table.cancel_delete)
            with c2:
                st.button(self.text("deleteButton"), type="primary", key="users_delete_confirm", on_click=table.confirm_delete)


def render_user_table(session) -> None:
    UserTable(session).render()


def render_delete_confirmation(session) -> None:
    DeleteConfirmation(session).render()


__all__ = ["DeleteConfirmation", "UserTable", "render_delete_confirmation", "render_user_table"]
