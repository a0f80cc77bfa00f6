from gear_sizer.cli import main

main()
