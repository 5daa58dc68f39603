# cruise_booking/__main__.py
import os

import uvicorn


def main():
    port = int(os.getenv("PORT", 8000))
    uvicorn.run("cruise_booking.main:app", host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
