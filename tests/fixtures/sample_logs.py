"""
Log calls checked by test_analyzer.

A line ending in a want comment must produce exactly the listed codes; every
other line must produce none.
"""
import logging

log = logging.getLogger(__name__)
slog = log
apiKey = "k"
name = "n"


def example():
    log.Print()
    log.Println("valid log message")
    log.Print("Capital letter")  # want "LOG001"
    log.Fatal("ошибка подключения")  # want "LOG003"
    log.Print("connection failed!")  # want "LOG002"
    log.Print("token" + apiKey)  # want "LOG004"
    slog.Debug("token validated")
    log.Print("connected to port 8080")
    log.Printf("formatted message: %s", "value")  # want "LOG002"
    log.info("Starting server...")  # want "LOG001" "LOG002"
    log.warning("user password reset")  # want "LOG004"
    log.error("retrying in 5 seconds")
    log.debug("request id " + name)
    log.debug(f"token {apiKey} refreshed")  # want "LOG004"
    log.info("done 🚀")  # want "LOG002"
    log.Print("Password" + apiKey)  # want "LOG001" "LOG004"
    log.info(name)
    log.info("%s done" % name)
    print("Not a log call!")
