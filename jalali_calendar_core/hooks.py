app_name = "jalali_calendar_core"
app_title = "Jalali Core"
app_publisher = "CoCode"
app_description = "Gregorian and Jalali calendar conversion, week numbers and month overlap for Frappe apps."
app_email = "support@example.com"
app_license = "MIT"

# Boot
boot_session = "jalali_calendar_core.boot.boot_session"

# Fixtures / Data
fixtures = []
