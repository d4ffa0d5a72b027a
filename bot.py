from bloxfruits_tracker.bot import main

if __name__ == '__main__':
    main()
