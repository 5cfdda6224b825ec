"""Fixed settings of the medicine box: display geometry, limits and pin numbers."""

SDA = 21
SCL = 22
SCREEN_WIDTH = 128
SCREEN_HEIGHT = 64
OLED_RESET = -1
SCREEN_ADDRESS = 0x3C

TEMP_UPPER_LIMIT = 32.0
TEMP_LOWER_LIMIT = 24.0
HUMIDITY_UPPER_LIMIT = 80.0
HUMIDITY_LOWER_LIMIT = 65.0
SNOOZE_TIME_MINUTES = 5

GAMMA_LDR = 0.7
RL10 = 33

NTP_SERVER = "pool.ntp.org"
UTC_OFFSET_DST = 0

BUZZER_PIN = 27
LED_ALARM = 26
LED_TEMP = 19
LED_HUMIDITY = 18
PB_UP = 34
PB_OK = 35
PB_DOWN = 32
DHT_PIN = 13
LDR_PIN = 33
SERVO_PIN = 14

ADC_RESOLUTION = 4096
ADC_REFERENCE_VOLTS = 3.3
LDR_SERIES_RESISTANCE = 2000