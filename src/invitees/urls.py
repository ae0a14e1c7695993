REGISTER_URL = "/register"
LOGIN_URL = "/login"
