"""
Manufacturer service schedules known to the app.

Each schedule lists service milestones for normal and severe driving plus a
set of general service intervals. Costs are in the currency the
manufacturer publishes them in (INR for two-wheelers, USD for cars).
"""

HONDA_ACTIVA_SCHEDULE = {
    "normal": [
        {
            "mileage": 1000, "kmage": 1600, "months": 1,
            "services": [
                "Engine oil change",
                "Engine oil filter replacement",
                "Brake system inspection",
                "Tire pressure check",
                "Battery terminals cleaning",
                "Lights and horn functionality test",
            ],
            "cost_low": 300, "cost_high": 500, "estimated_cost": 400,
        },
        {
            "mileage": 2500, "kmage": 4000, "months": 4,
            "services": [
                "Engine oil change",
                "Engine oil filter replacement",
                "Brake oil change",
                "Air cleaner element inspection",
                "Spark plug inspection",
                "Suspension oil check",
                "Throttle and clutch adjustments",
                "Fuel system cleaning",
            ],
            "cost_low": 500, "cost_high": 800, "estimated_cost": 650,
        },
        {
            "mileage": 5000, "kmage": 8000, "months": 8,
            "services": [
                "Complete engine service",
                "Transmission oil change",
                "Brake pads inspection",
                "Tire condition and tread depth check",
                "Carburetor tuning",
                "Exhaust system inspection",
                "Drive belt inspection",
                "Steering system check",
            ],
            "cost_low": 800, "cost_high": 1200, "estimated_cost": 1000,
        },
        {
            "mileage": 10000, "kmage": 16000, "months": 12,
            "services": [
                "Major service - complete overhaul",
                "Piston rings inspection",
                "Valve clearance adjustment",
                "Cooling system flush",
                "Fuel injector cleaning",
                "Electrical system check",
                "Suspension complete inspection",
                "Brake system overhaul",
            ],
            "cost_low": 1200, "cost_high": 2000, "estimated_cost": 1600,
        },
    ],
    "severe": [
        {
            "mileage": 750, "kmage": 1200, "months": 1,
            "services": [
                "Engine oil change (more frequent)",
                "Engine oil filter replacement",
                "Brake system inspection",
                "Tire pressure check",
                "Battery terminals cleaning",
                "Air filter cleaning",
            ],
            "cost_low": 350, "cost_high": 550, "estimated_cost": 450,
        },
        {
            "mileage": 2000, "kmage": 3200, "months": 3,
            "services": [
                "Engine oil change",
                "Engine oil filter replacement",
                "Brake oil change",
                "Air cleaner element replacement",
                "Spark plug replacement",
                "Suspension oil check",
                "Throttle and clutch adjustments",
                "Fuel system cleaning",
            ],
            "cost_low": 600, "cost_high": 900, "estimated_cost": 750,
        },
        {
            "mileage": 4000, "kmage": 6400, "months": 6,
            "services": [
                "Complete engine service",
                "Transmission oil change",
                "Brake pads replacement",
                "Tire replacement if needed",
                "Carburetor complete overhaul",
                "Exhaust system cleaning",
                "Drive belt replacement",
                "Steering system lubrication",
            ],
            "cost_low": 900, "cost_high": 1400, "estimated_cost": 1150,
        },
        {
            "mileage": 8000, "kmage": 12800, "months": 10,
            "services": [
                "Major service - complete overhaul",
                "Piston rings replacement",
                "Valve clearance adjustment",
                "Cooling system complete flush",
                "Fuel injector replacement",
                "Electrical system overhaul",
                "Suspension complete replacement",
                "Brake system complete overhaul",
            ],
            "cost_low": 1500, "cost_high": 2500, "estimated_cost": 2000,
        },
    ],
    "general_services": {
        "oil_change": {
            "interval": "Every 2,500 km or 4 months",
            "description": "Change engine oil and oil filter for optimal performance",
        },
        "tire_rotation": {
            "interval": "Every 5,000 km or 6 months",
            "description": "Rotate tires to ensure even wear and extend tire life",
        },
        "brake_inspection": {
            "interval": "Every 10,000 km or 12 months",
            "description": "Inspect brake pads, brake fluid, and brake system",
        },
        "battery_check": {
            "interval": "Every 3 months",
            "description": "Check battery terminals, voltage, and electrolyte levels",
        },
        "air_filter_replace": {
            "interval": "Every 6 months or dusty conditions",
            "description": "Replace air filter to maintain engine efficiency",
        },
    },
}

TOYOTA_CAMRY_SCHEDULE = {
    "normal": [
        {
            "mileage": 5000, "kmage": 8000, "months": 6,
            "services": [
                "Engine oil and filter change",
                "Tire rotation",
                "Visual inspection of brakes",
                "Check fluid levels",
                "Battery test",
                "Lights inspection",
            ],
            "cost_low": 50, "cost_high": 100, "estimated_cost": 75,
        },
        {
            "mileage": 10000, "kmage": 16000, "months": 12,
            "services": [
                "Engine oil and filter change",
                "Tire rotation",
                "Brake inspection",
                "Transmission fluid check",
                "Coolant system inspection",
                "Air filter replacement",
                "Cabin air filter replacement",
            ],
            "cost_low": 150, "cost_high": 250, "estimated_cost": 200,
        },
        {
            "mileage": 20000, "kmage": 32000, "months": 24,
            "services": [
                "Engine oil and filter change",
                "Tire rotation",
                "Brake fluid replacement",
                "Transmission fluid replacement",
                "Coolant replacement",
                "Spark plugs replacement",
                "Fuel system cleaning",
            ],
            "cost_low": 300, "cost_high": 500, "estimated_cost": 400,
        },
        {
            "mileage": 30000, "kmage": 48000, "months": 36,
            "services": [
                "Major service - 30k mile service",
                "Timing belt inspection",
                "Brake pads replacement",
                "Suspension inspection",
                "Exhaust system inspection",
                "Power steering fluid replacement",
                "Differential oil change",
            ],
            "cost_low": 500, "cost_high": 800, "estimated_cost": 650,
        },
    ],
    "severe": [
        {
            "mileage": 3000, "kmage": 4800, "months": 3,
            "services": [
                "Engine oil and filter change (more frequent)",
                "Tire rotation",
                "Brake inspection",
                "Air filter cleaning",
                "Battery check",
                "Fluid level checks",
            ],
            "cost_low": 60, "cost_high": 120, "estimated_cost": 90,
        },
        {
            "mileage": 7500, "kmage": 12000, "months": 9,
            "services": [
                "Engine oil and filter change",
                "Tire rotation",
                "Brake inspection",
                "Transmission fluid check",
                "Air filter replacement",
                "Cabin air filter replacement",
                "Fuel system inspection",
            ],
            "cost_low": 180, "cost_high": 300, "estimated_cost": 240,
        },
        {
            "mileage": 15000, "kmage": 24000, "months": 18,
            "services": [
                "Engine oil and filter change",
                "Tire rotation and alignment",
                "Brake fluid replacement",
                "Transmission service",
                "Coolant system flush",
                "Spark plugs replacement",
                "Fuel injector cleaning",
            ],
            "cost_low": 350, "cost_high": 600, "estimated_cost": 475,
        },
        {
            "mileage": 22500, "kmage": 36000, "months": 27,
            "services": [
                "Major service - severe driving",
                "Timing belt replacement",
                "Brake system overhaul",
                "Suspension service",
                "Exhaust system service",
                "Power steering service",
                "Differential service",
            ],
            "cost_low": 600, "cost_high": 1000, "estimated_cost": 800,
        },
    ],
    "general_services": {
        "oil_change": {
            "interval": "Every 5,000 miles or 6 months",
            "description": "Change engine oil and oil filter for optimal performance",
        },
        "tire_rotation": {
            "interval": "Every 5,000 miles or 6 months",
            "description": "Rotate tires to ensure even wear and extend tire life",
        },
        "brake_inspection": {
            "interval": "Every 10,000 miles or 12 months",
            "description": "Inspect brake pads, brake fluid, and brake system",
        },
        "battery_check": {
            "interval": "Every 6 months",
            "description": "Check battery terminals, voltage, and charging system",
        },
        "air_filter_replace": {
            "interval": "Every 12,000 miles or 12 months",
            "description": "Replace air filter to maintain engine efficiency",
        },
    },
}

# make -> model (upper case) -> schedule
MAINTENANCE_SCHEDULES = {
    "Honda": {
        "ACTIVA": HONDA_ACTIVA_SCHEDULE,
        "ACTIVA 6G": HONDA_ACTIVA_SCHEDULE,
        "ACTIVA 125": HONDA_ACTIVA_SCHEDULE,
        "DIO": HONDA_ACTIVA_SCHEDULE,
        "GRAZIA": HONDA_ACTIVA_SCHEDULE,
    },
    "Toyota": {
        "CAMRY": TOYOTA_CAMRY_SCHEDULE,
        "COROLLA": TOYOTA_CAMRY_SCHEDULE,
        "PRIUS": TOYOTA_CAMRY_SCHEDULE,
        "RAV4": TOYOTA_CAMRY_SCHEDULE,
    },
}
