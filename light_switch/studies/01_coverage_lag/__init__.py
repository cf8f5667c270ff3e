"""
Study 01: Coverage Lag

Questions:
- Does full coverage follow the coupon-collector curve?
- How many days does the relay protocol waste after coverage?
- How does the lag grow with the population?
"""
