import streamlit as st


def render_user_guide() -> None:
    st.header("User Guide")
    st.markdown(
        """
        ### Getting Started
        - When the app starts it loads the saved portfolio file (`portfolio.txt`
          in the working directory by default). If the file does not exist the
          portfolio simply starts empty.

        ### Adding Stocks
        1. Open the *Add Stock* form.
        2. Enter the symbol, the number of shares and the price you paid.
        3. Symbols are stored in upper case. The current price starts out equal
           to the buy price.

        ### Updating Prices
        - Type a symbol in *Update Price*. The holding's current price is shown;
          enter the new one and submit. Symbols match regardless of case.

        ### Removing Stocks
        - Enter a symbol in *Remove Stock*. Only the first matching holding is
          removed if the same symbol was added more than once.

        ### Current Portfolio Table
        - Shows quantity, buy price, current price, market value, invested
          amount and profit or loss, each to four decimal places.

        ### Saving, Loading and Exporting
        - *Save* overwrites the portfolio file with the table contents.
        - *Load* discards unsaved changes and re-reads the portfolio file. Lines
          that cannot be read are skipped.
        - *Export CSV* writes the table, including the computed columns, to the
          file you choose. *Download CSV* sends the same file to your browser.

        ### Tips
        - Nothing is saved automatically. Press *Save* before closing the app.
        - Failed actions are listed under *Error Log* at the bottom of the page.
        """
    )
