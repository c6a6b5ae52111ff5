"""
    Constants of the shipping service.

    - database: environment variable names, driver id, JDBC URL template
    - errorcodes: configuration error codes, messages and resolution strategies
"""

from dotenv import load_dotenv

load_dotenv(".env")
